import logging
import sys

DEFAULT_CARDS_URL = "/svg-cards.svg"

__all__ = ["DEFAULT_CARDS_URL", "setup_logging"]


def setup_logging(debug: bool = False, stream=None) -> None:
    """
    Send log records of a card game to ``stream``, stdout by default.

    With ``debug`` the ``playing_cards`` loggers report at DEBUG, which shows
    refused pile moves and events nobody declared. Pillow's plugin loggers
    stay at INFO since every card image opened would log otherwise.

    Parameters
    ----------
    debug : bool
        If True, log the package at DEBUG, otherwise INFO
    stream : TextIO | None
        Where records are written
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )
    logging.getLogger(__name__).setLevel(level)
    logging.getLogger("PIL").setLevel(logging.INFO)
