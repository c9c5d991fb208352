from playing_cards.game_pieces.cards import Card
from playing_cards.game_pieces.constants import Rank, Suit, STANDARD_RANKS, JOKER_COLORS


class Deck:
    """
    A deck of 52 distinct cards plus optional jokers, all with the same back.

    The deck is built once and drained into piles with :meth:`deal`; the
    "top" is the end of the list.
    """

    def __init__(self, back_color: str = "red", jokers: int = 0):
        if not 0 <= jokers <= len(JOKER_COLORS):
            raise ValueError(f"A deck holds at most {len(JOKER_COLORS)} jokers, got {jokers}")
        self.back_color = back_color
        self._cards: list[Card] = [
            Card(rank, suit, back_color=back_color) for suit in Suit for rank in STANDARD_RANKS
        ]
        self._cards.extend(
            Card(Rank.JOKER, back_color=back_color, color=color) for color in JOKER_COLORS[:jokers]
        )
        for card in self._cards:
            card.transfer(self)

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def deal(self) -> list[Card]:
        """Hand over every card, bottom to top; the deck is empty afterwards."""
        cards, self._cards = self._cards, []
        for card in cards:
            card.transfer(None)
        return cards
