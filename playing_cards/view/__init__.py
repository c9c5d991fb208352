from playing_cards.view.view import View, ViewEvent, DOM_EVENTS
from playing_cards.view.layout import FanStyle, Placement, fan_layout, place
from playing_cards.view.pile_view import PileView
from playing_cards.view.table_view import TableView

__all__ = [
    "DOM_EVENTS",
    "FanStyle",
    "PileView",
    "Placement",
    "TableView",
    "View",
    "ViewEvent",
    "fan_layout",
    "place",
]
