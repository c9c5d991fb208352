import xml.etree.ElementTree as ET

from playing_cards import DEFAULT_CARDS_URL
from playing_cards.card_supplier.card_supplier import CardSupplier
from playing_cards.game_pieces.cards import Card
from playing_cards import svg


class SVGCardsCardSupplier(CardSupplier):
    """
    Supplies cards from an SVG-cards sprite sheet as ``<use>`` references.

    Parameters
    ----------
    url : str
        Location of the sprite sheet; card keys are appended as fragments.
    """

    def __init__(self, url: str = DEFAULT_CARDS_URL):
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def create_card(self, card: Card) -> ET.Element:
        key = self.visual_key(card)
        fill = card.back_color if card.is_face_down() else None
        return svg.use(f"{self.url}#{key}", fill=fill)

    def __repr__(self) -> str:
        return f"SVGCardsCardSupplier({self.url!r})"
