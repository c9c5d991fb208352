"""Ready-made pile invariants: predicates over the proposed contents of a pile."""

from collections.abc import Callable, Sequence

from playing_cards.errors import ConfigurationError
from playing_cards.game_pieces.cards import Card

Invariant = Callable[[Sequence[Card]], bool]


def TAUTOLOGY(cards: Sequence[Card]) -> bool:
    return True


def FACE_DOWN(cards: Sequence[Card]) -> bool:
    return all(card.is_face_down() for card in cards)


def FACE_UP(cards: Sequence[Card]) -> bool:
    return all(card.is_face_up() for card in cards)


def max_size(n: int) -> Invariant:
    def _max_size(cards: Sequence[Card]) -> bool:
        return len(cards) <= n

    _max_size.__name__ = f"max_size({n})"
    return _max_size


CELL = max_size(1)

_NAMED = {
    "tautology": TAUTOLOGY,
    "face_down": FACE_DOWN,
    "face_up": FACE_UP,
    "cell": CELL,
}


def resolve_invariant(value: Invariant | str | None) -> Invariant:
    """
    Turn a configuration value into a pile invariant.

    Accepts ``None`` (no constraint), a callable, one of the names
    ``tautology``, ``face_down``, ``face_up``, ``cell``, or ``max_size:N``.
    """
    if value is None:
        return TAUTOLOGY
    if callable(value):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_")
        if key in _NAMED:
            return _NAMED[key]
        name, _, arg = key.partition(":")
        if name == "max_size":
            try:
                return max_size(int(arg))
            except ValueError:
                pass
    raise ConfigurationError(f"Unknown pile invariant '{value}'")
