from enum import Enum


class Suit(str, Enum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    @property
    def singular(self) -> str:
        return self.value[:-1]


class Rank(str, Enum):
    ACE = "ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"
    JOKER = "joker"


PIP_RANKS = (
    Rank.ACE,
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
)
COURT_RANKS = (Rank.JACK, Rank.QUEEN, Rank.KING)
STANDARD_RANKS = PIP_RANKS + COURT_RANKS

JOKER_COLORS = ("red", "black")
RED_SUITS = (Suit.DIAMONDS, Suit.HEARTS)
