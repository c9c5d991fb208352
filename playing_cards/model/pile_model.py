from collections.abc import Iterable, Iterator, Sequence
import logging
import random

from playing_cards.errors import ConfigurationError
from playing_cards.game_pieces.cards import Card
from playing_cards.game_pieces.deck import Deck
from playing_cards.model.invariants import Invariant, resolve_invariant
from playing_cards.model.model import Model

logger = logging.getLogger(__name__)


def _as_cards(cards: Card | Iterable[Card]) -> list[Card]:
    if isinstance(cards, Card):
        return [cards]
    return list(cards)


class PileModel(Model):
    """
    An ordered pile of cards guarded by an invariant.

    The top of the pile is the end of the list. Every mutation is checked
    against the invariant on the proposed contents before it is committed; a
    rejected mutation leaves the pile untouched and emits nothing.

    Cards move between piles top-most first: :meth:`take` returns the top card
    first and :meth:`add` puts the first given card on top, so
    ``pile.add(pile.take(n))`` restores the pile.

    Parameters
    ----------
    invariant : Invariant | str | None
        Predicate over the pile's contents; defaults to no constraint.
    cards : Deck | Iterable[Card]
        Initial contents, bottom to top. A deck is drained into the pile.
    """

    def __init__(self, invariant: Invariant | str | None = None, cards: Deck | Iterable[Card] = ()):
        super().__init__()
        self._invariant = resolve_invariant(invariant)
        initial = list(cards.cards) if isinstance(cards, Deck) else list(cards)
        if not isinstance(cards, Deck):
            for card in initial:
                if card.holder is not None:
                    raise ConfigurationError(f"{card!r} is already held by {card.holder!r}")
            if len(set(map(id, initial))) < len(initial):
                raise ConfigurationError("The initial cards of a pile must be distinct")
        if not self._allows(initial):
            name = getattr(self._invariant, "__name__", repr(self._invariant))
            raise ConfigurationError(f"Initial cards of the pile violate invariant '{name}'")
        if isinstance(cards, Deck):
            cards.deal()
        self._cards: list[Card] = initial
        for card in initial:
            card.transfer(self)

    @property
    def invariant(self) -> Invariant:
        return self._invariant

    @property
    def count(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def top(self) -> Card | None:
        return self._cards[-1] if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return self.each()

    def __contains__(self, card: object) -> bool:
        return any(card is c for c in self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def each(self) -> Iterator[Card]:
        """Iterate over the cards as they are now, bottom to top."""
        return iter(tuple(self._cards))

    def _allows(self, proposed: Sequence[Card]) -> bool:
        return bool(self._invariant(proposed))

    def add(self, cards: Card | Iterable[Card]) -> bool:
        """
        Put cards on top of this pile; the first given card ends on top.

        Returns False, leaving the pile unchanged, when no cards are given, a
        card is held by this or another pile or deck, or the invariant rejects
        the result.
        """
        incoming = _as_cards(cards)
        if not incoming:
            return False
        if any(card.holder is not None for card in incoming) or len(set(map(id, incoming))) < len(incoming):
            logger.debug("Rejected add to %r: card held elsewhere or given twice", self)
            return False
        proposed = self._cards + incoming[::-1]
        if not self._allows(proposed):
            logger.debug("Rejected add of %d card(s) to %r: invariant failed", len(incoming), self)
            return False
        self._cards = proposed
        for card in incoming:
            card.transfer(self)
        self.changed()
        return True

    def take(self, n: int = 1) -> list[Card] | None:
        """
        Remove the top ``n`` cards and return them, top-most first.

        Returns None, leaving the pile unchanged, when there are fewer than
        ``n`` cards or the invariant rejects the remainder.
        """
        if n < 0 or n > len(self._cards):
            logger.debug("Cannot take %d card(s) from %r holding %d", n, self, len(self._cards))
            return None
        if n == 0:
            return []
        remainder = self._cards[:-n]
        if not self._allows(remainder):
            logger.debug("Rejected take of %d card(s) from %r: invariant failed", n, self)
            return None
        taken = self._cards[-n:][::-1]
        self._cards = remainder
        for card in taken:
            card.transfer(None)
        self.changed()
        return taken

    def shuffle(self, rng: random.Random | None = None) -> bool:
        """Put the cards in a random order; announces the change even for zero or one card."""
        proposed = list(self._cards)
        (rng or random).shuffle(proposed)
        if not self._allows(proposed):
            logger.debug("Rejected shuffle of %r: invariant failed", self)
            return False
        self._cards = proposed
        self.changed()
        return True

    def __repr__(self) -> str:
        return f"PileModel({len(self._cards)} cards)"
