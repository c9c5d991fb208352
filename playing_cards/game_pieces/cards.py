from dataclasses import dataclass, field

from playing_cards.game_pieces.constants import Rank, Suit, PIP_RANKS, JOKER_COLORS, RED_SUITS


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """
    A playing card.

    Cards compare by identity: two aces of spades from two decks are different
    cards. Only the facing and the holding pile or deck change after creation.
    """

    rank: Rank
    suit: Suit | None = None
    back_color: str = "red"
    face_up: bool = False
    color: str | None = None
    # The pile or deck holding this card, if any
    holder: object = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.rank is Rank.JOKER:
            if self.suit is not None:
                raise ValueError("A joker has no suit")
            color = self.color or "red"
            if color not in JOKER_COLORS:
                raise ValueError(f"Unknown joker color '{color}'")
            object.__setattr__(self, "color", color)
        else:
            if self.suit is None:
                raise ValueError(f"A {self.rank.value} needs a suit")
            object.__setattr__(self, "color", "red" if self.suit in RED_SUITS else "black")

    @property
    def name(self) -> str:
        if self.is_joker():
            return f"{self.color} joker"
        return f"{self.rank.value} of {self.suit.value}"

    @property
    def pips(self) -> int | None:
        if not self.is_pip_card():
            return None
        return PIP_RANKS.index(self.rank) + 1

    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    def is_pip_card(self) -> bool:
        return self.rank in PIP_RANKS

    def is_face_up(self) -> bool:
        return self.face_up

    def is_face_down(self) -> bool:
        return not self.face_up

    def transfer(self, holder: object) -> None:
        """Hand this card to ``holder``; None means nothing holds it."""
        object.__setattr__(self, "holder", holder)

    # State transitions
    def turn(self) -> None:
        object.__setattr__(self, "face_up", not self.face_up)

    def turn_face_up(self) -> None:
        if not self.face_up:
            object.__setattr__(self, "face_up", True)

    def turn_face_down(self) -> None:
        if self.face_up:
            object.__setattr__(self, "face_up", False)

    def __repr__(self) -> str:
        facing = "up" if self.face_up else "down"
        return f"Card({self.name!r}, face {facing})"
