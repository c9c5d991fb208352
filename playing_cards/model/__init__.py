from playing_cards.model.model import Model, ModelEvent
from playing_cards.model.pile_model import PileModel
from playing_cards.model.table_model import TableModel
from playing_cards.model import invariants

__all__ = ["Model", "ModelEvent", "PileModel", "TableModel", "invariants"]
