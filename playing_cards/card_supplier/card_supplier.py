from abc import ABC, abstractmethod
import xml.etree.ElementTree as ET

from playing_cards.game_pieces.cards import Card

BACK_KEY = "back"


def visual_key(card: Card) -> str:
    """
    The asset key for the visible side of ``card``.

    Face-down cards show their back (``"back"``), jokers are
    ``"<color>_joker"`` and other cards ``"<rank>_<suit>"``, with the pip
    count as rank for ace through ten.
    """
    if card.is_face_down():
        return BACK_KEY
    if card.is_joker():
        return f"{card.color}_joker"
    rank = card.pips if card.is_pip_card() else card.rank.value
    return f"{rank}_{card.suit.singular}"


class CardSupplier(ABC):
    """
    Maps a card's visible state to an SVG element.

    Suppliers are stateless: the same card state always yields an equivalent
    element and creating one changes nothing.
    """

    def visual_key(self, card: Card) -> str:
        return visual_key(card)

    @abstractmethod
    def create_card(self, card: Card) -> ET.Element: ...
