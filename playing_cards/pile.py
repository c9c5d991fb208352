from collections.abc import Mapping
from typing import Any
import logging
import math

from playing_cards.errors import ConfigurationError
from playing_cards.game import Game, GameElement
from playing_cards.model.invariants import resolve_invariant
from playing_cards.model.pile_model import PileModel
from playing_cards.view.layout import FanStyle
from playing_cards.view.pile_view import PileView

logger = logging.getLogger(__name__)


def _coerce(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


class Pile(GameElement):
    """
    A pile in a card game: a :class:`PileModel` with its :class:`PileView` on the game's table.

    Parameters
    ----------
    game : Game
        The game this pile is part of.
    specification : Mapping[str, Any]
        ``name`` (required), ``deck`` (name of a deck in the game to drain into
        the pile), ``invariant``, ``fanning``, ``position`` (``{"x", "y"}``)
        and ``rotation`` in degrees.
    """

    def __init__(self, game: Game, specification: Mapping[str, Any] | None = None):
        specification = specification or {}
        if not isinstance(specification, Mapping):
            raise ConfigurationError(f"A pile specification must be a mapping, got {specification!r}")
        name = specification.get("name")
        if not name:
            raise ConfigurationError(f"No name specified in pile specification {dict(specification)!r}")
        if game.pile(name) is not None:
            raise ConfigurationError(f"A pile named '{name}' already exists in game '{game.name}'")
        super().__init__(game, str(name))

        invariant = resolve_invariant(specification.get("invariant"))
        cards = ()
        deck_name = specification.get("deck")
        if deck_name is not None:
            deck = game.deck(deck_name)
            if deck is None:
                logger.warning("Pile '%s' refers to unknown deck '%s'; starting empty", name, deck_name)
            else:
                cards = deck

        self._model = PileModel(invariant, cards)
        self._fanning = FanStyle.parse(specification.get("fanning"))
        position = specification.get("position")
        position = position if isinstance(position, Mapping) else {}
        self._x = _coerce(position.get("x", 0))
        self._y = _coerce(position.get("y", 0))
        self._rotation = _coerce(specification.get("rotation", 0))

        self._view = PileView(
            game.table_view,
            self._model,
            self._x,
            self._y,
            fanning=self._fanning,
            rotation=self._rotation,
        )
        game._register_pile(self)

    @property
    def model(self) -> PileModel:
        return self._model

    @property
    def view(self) -> PileView:
        return self._view

    def update_view(self) -> None:
        self._view.configure(x=self._x, y=self._y, fanning=self._fanning, rotation=self._rotation)
        self._view.render()

    @property
    def fanning(self) -> FanStyle:
        return self._fanning

    @fanning.setter
    def fanning(self, fan_type: FanStyle | str | None) -> None:
        self._fanning = FanStyle.parse(fan_type)
        self.update_view()

    def is_squared(self) -> bool:
        return self._fanning is FanStyle.NONE

    def is_fanned(self) -> bool:
        return not self.is_squared()

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = _coerce(value)
        self.update_view()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = _coerce(value)
        self.update_view()

    def move_to(self, x: float, y: float) -> None:
        self._x, self._y = _coerce(x), _coerce(y)
        self.update_view()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = _coerce(value)
        self.update_view()

    def __repr__(self) -> str:
        return f"Pile({self.name!r}, {len(self._model)} cards, fanning={self._fanning.value})"


def move(source: PileModel, destination: PileModel, n: int = 1) -> bool:
    """
    Move the top ``n`` cards from ``source`` onto ``destination``, keeping their order.

    Returns False when ``source`` cannot give the cards or ``destination``
    refuses them; in the latter case the cards go back onto ``source``.
    """
    cards = source.take(n)
    if cards is None:
        return False
    if not cards:
        return True
    if destination.add(cards):
        return True
    logger.debug("%r refused %d card(s) from %r; putting them back", destination, n, source)
    if not source.add(cards):
        # only an invariant that depends on more than the contents can refuse here
        raise RuntimeError(f"Could not return {n} card(s) to {source!r}")
    return False
