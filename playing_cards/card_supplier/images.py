from pathlib import Path
import logging
import xml.etree.ElementTree as ET

from PIL import Image

from playing_cards.card_supplier.card_supplier import CardSupplier
from playing_cards.constants import CARD_W, CARD_H
from playing_cards.game_pieces.cards import Card
from playing_cards import svg

logger = logging.getLogger(__name__)


def image_size(path: Path | str) -> tuple[float, float]:
    """Pixel size of the image at ``path``; the default card size when it cannot be read."""
    try:
        with Image.open(path) as img:
            return img.size
    except OSError:
        logger.debug("No readable card image at %s, using default size", path)
        return CARD_W, CARD_H


class ImageCardSupplier(CardSupplier):
    """
    Supplies cards as ``<image>`` elements, one image file per card key.

    Parameters
    ----------
    directory : Path | str
        Directory holding ``<key>.<extension>`` files, e.g. ``queen_heart.png``
        and ``back.png``.
    extension : str
        Image file extension.
    """

    def __init__(self, directory: Path | str, extension: str = "png"):
        self._directory = Path(directory)
        self._extension = extension.lstrip(".")

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, card: Card) -> Path:
        return self._directory / f"{self.visual_key(card)}.{self._extension}"

    def create_card(self, card: Card) -> ET.Element:
        path = self.path_for(card)
        width, height = image_size(path)
        back_color = card.back_color if card.is_face_down() else None
        return svg.image(path.as_posix(), width, height, data_back_color=back_color)

    def __repr__(self) -> str:
        return f"ImageCardSupplier({str(self._directory)!r}, {self._extension!r})"
