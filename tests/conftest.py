import pytest

from playing_cards.game import Game
from playing_cards.game_pieces import Card, Deck, Rank, Suit


@pytest.fixture
def cards():
    return [Card(rank, Suit.HEARTS) for rank in (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX)]


@pytest.fixture
def deck():
    return Deck(back_color="maroon")


@pytest.fixture
def game():
    g = Game("test")
    g.add_deck("main", Deck(back_color="maroon"))
    return g


class Recorder:
    """Callable that remembers the arguments of every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.fixture
def recorder():
    return Recorder()
