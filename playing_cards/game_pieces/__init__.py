from playing_cards.game_pieces.constants import Rank, Suit
from playing_cards.game_pieces.cards import Card
from playing_cards.game_pieces.deck import Deck

__all__ = ["Rank", "Suit", "Card", "Deck"]
