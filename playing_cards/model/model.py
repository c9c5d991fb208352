from enum import Enum

from playing_cards.events import EventAware


class ModelEvent(str, Enum):
    CHANGED = "model:changed"


class Model(EventAware):
    """A mutable entity that announces every successful mutation with ``ModelEvent.CHANGED``."""

    def __init__(self):
        super().__init__([ModelEvent.CHANGED])

    def changed(self) -> None:
        self.emit(ModelEvent.CHANGED, self)
