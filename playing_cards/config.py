from collections.abc import Mapping
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import logging

import yaml

from playing_cards import DEFAULT_CARDS_URL
from playing_cards.card_supplier import CardSupplier, resolve_supplier
from playing_cards.constants import TABLE_W, TABLE_H
from playing_cards.errors import ConfigurationError
from playing_cards.game import Game
from playing_cards.game_pieces.deck import Deck

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    cards_url: str = DEFAULT_CARDS_URL
    width: float = TABLE_W
    height: float = TABLE_H
    supplier: str = "svg-cards"
    supplier_options: dict[str, Any] = field(default_factory=dict)

    def make_supplier(self) -> CardSupplier:
        options = dict(self.supplier_options)
        if self.supplier == "svg-cards":
            options.setdefault("url", self.cards_url)
        return resolve_supplier(self.supplier, **options)


DEFAULT_SETTINGS = Settings()


def _resolve_config_path(config_path: str | Path | None) -> Path:
    return Path(config_path) if config_path else Path.cwd() / "config.yaml"


def _load_config_data(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read config file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _dimension(table_cfg: Mapping[str, Any], key: str, default: float) -> float:
    value = table_cfg.get(key, default)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Table {key} must be a number, got {value!r}") from e


def _make_deck(name: str, deck_cfg: Any) -> Deck:
    if deck_cfg is None:
        deck_cfg = {}
    if not isinstance(deck_cfg, Mapping):
        raise ConfigurationError(f"Deck '{name}' must map to deck settings, got {deck_cfg!r}")
    jokers = deck_cfg.get("jokers", 0)
    try:
        return Deck(back_color=str(deck_cfg.get("back_color", "red")), jokers=int(jokers))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Deck '{name}' has invalid jokers {jokers!r}: {e}") from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    data = _load_config_data(_resolve_config_path(config_path))
    table_cfg = data.get("table", {})
    table_cfg = table_cfg if isinstance(table_cfg, dict) else {}
    cards_cfg = data.get("cards", {})
    cards_cfg = cards_cfg if isinstance(cards_cfg, dict) else {}

    cards_url = str(cards_cfg.get("url", "")).strip() or DEFAULT_SETTINGS.cards_url
    env_url = os.getenv("PLAYING_CARDS_SVG_URL", "").strip()
    if env_url:
        cards_url = env_url

    options = cards_cfg.get("options", {})
    return Settings(
        cards_url=cards_url,
        width=_dimension(table_cfg, "width", DEFAULT_SETTINGS.width),
        height=_dimension(table_cfg, "height", DEFAULT_SETTINGS.height),
        supplier=str(cards_cfg.get("supplier", DEFAULT_SETTINGS.supplier)),
        supplier_options=dict(options) if isinstance(options, dict) else {},
    )


def build_game(data: dict[str, Any], settings: Settings = DEFAULT_SETTINGS) -> Game:
    """
    Build a game from a configuration mapping.

    ``game.name`` names the game, ``decks`` maps deck names to
    ``{back_color, jokers}`` and ``piles`` lists pile specifications, created
    in order so that earlier piles drain the decks first.
    """
    game_cfg = data.get("game", {}) or {}
    if not isinstance(game_cfg, Mapping):
        raise ConfigurationError(f"'game' must map to game settings, got {game_cfg!r}")
    game = Game(
        name=str(game_cfg.get("name", "game")),
        supplier=settings.make_supplier(),
        width=settings.width,
        height=settings.height,
    )

    decks = data.get("decks", {}) or {}
    if not isinstance(decks, dict):
        raise ConfigurationError("'decks' must map deck names to deck settings")
    for name, deck_cfg in decks.items():
        game.add_deck(str(name), _make_deck(str(name), deck_cfg))

    piles = data.get("piles", []) or []
    if not isinstance(piles, list):
        raise ConfigurationError("'piles' must be a list of pile specifications")
    for index, specification in enumerate(piles):
        if not isinstance(specification, Mapping):
            raise ConfigurationError(f"Pile #{index} must be a pile specification mapping, got {specification!r}")
        game.add_pile(specification)

    logger.info("Built game '%s' with %d piles", game.name, len(game.piles))
    return game


def load_game(config_path: str | Path | None = None) -> Game:
    path = _resolve_config_path(config_path)
    return build_game(_load_config_data(path), load_settings(path))
