from collections.abc import Mapping
from typing import Any
import logging

from playing_cards.card_supplier.card_supplier import CardSupplier
from playing_cards.constants import TABLE_W, TABLE_H
from playing_cards.errors import ConfigurationError
from playing_cards.game_pieces.deck import Deck
from playing_cards.model.table_model import TableModel
from playing_cards.view.table_view import TableView

logger = logging.getLogger(__name__)


class Game:
    """
    The context a card game is built in: a table, its decks and its piles.

    Parameters
    ----------
    name : str
        Name of the game.
    supplier : CardSupplier | None
        Supplier used for every pile on the table.
    width, height : float
        Size of the table.
    """

    def __init__(
        self,
        name: str = "game",
        supplier: CardSupplier | None = None,
        width: float = TABLE_W,
        height: float = TABLE_H,
    ):
        self.name = name
        self.table = TableModel()
        self.table_view = TableView(self.table, width, height, supplier=supplier)
        self._decks: dict[str, Deck] = {}
        self._piles: dict[str, "Pile"] = {}

    @property
    def decks(self) -> dict[str, Deck]:
        return dict(self._decks)

    @property
    def piles(self) -> dict[str, "Pile"]:
        return dict(self._piles)

    def add_deck(self, name: str, deck: Deck) -> Deck:
        if name in self._decks:
            raise ConfigurationError(f"A deck named '{name}' already exists in game '{self.name}'")
        self._decks[name] = deck
        return deck

    def deck(self, name: str) -> Deck | None:
        return self._decks.get(name)

    def add_pile(self, specification: Mapping[str, Any]) -> "Pile":
        from playing_cards.pile import Pile

        return Pile(self, specification)

    def pile(self, name: str) -> "Pile | None":
        return self._piles.get(name)

    def _register_pile(self, pile: "Pile") -> None:
        if pile.name in self._piles:
            raise ConfigurationError(f"A pile named '{pile.name}' already exists in game '{self.name}'")
        self._piles[pile.name] = pile
        self.table.add_pile(pile.name, pile.model)

    def to_svg(self) -> str:
        return self.table_view.to_svg()

    def __repr__(self) -> str:
        return f"Game({self.name!r}, piles={sorted(self._piles)})"


class GameElement:
    """Something that is part of a game, e.g. a pile."""

    def __init__(self, game: Game, name: str):
        self._game = game
        self._name = name

    @property
    def game(self) -> Game:
        return self._game

    @property
    def name(self) -> str:
        return self._name
