from collections.abc import Mapping
from enum import Enum
from typing import Any
import logging
import xml.etree.ElementTree as ET

from playing_cards import svg
from playing_cards.events import EventAware
from playing_cards.model.model import Model, ModelEvent

logger = logging.getLogger(__name__)


class ViewEvent(str, Enum):
    CLICK = "view:click"
    DRAG_START = "view:drag-start"
    DRAG = "view:drag"
    DRAG_END = "view:drag-end"
    DRAG_OVER = "view:drag-over"
    DROP = "view:drop"


# Browser event names as delivered by the page
DOM_EVENTS = {
    "click": ViewEvent.CLICK,
    "dragstart": ViewEvent.DRAG_START,
    "drag": ViewEvent.DRAG,
    "dragend": ViewEvent.DRAG_END,
    "dragover": ViewEvent.DRAG_OVER,
    "drop": ViewEvent.DROP,
}


class View(EventAware):
    """
    Base class of views.

    A view shows exactly one model for its whole life and renders itself
    whenever that model changes. Views form a tree through their parents.

    Parameters
    ----------
    parent : View | None
        The parent view; None for the root view.
    model : Model
        The model this view shows.
    config : Mapping[str, Any] | None
        Initial configuration.
    """

    tag = "g"

    def __init__(self, parent: "View | None", model: Model, config: Mapping[str, Any] | None = None):
        super().__init__(ViewEvent)
        self._parent = parent
        self._model = model
        self._config: dict[str, Any] = {}
        self._children: list[View] = []
        self._element = svg.element(self.tag)

        self.configure(config)
        if parent is not None:
            parent._children.append(self)
        model.on(ModelEvent.CHANGED, self._on_model_changed)

    @property
    def parent(self) -> "View | None":
        return self._parent

    @property
    def model(self) -> Model:
        return self._model

    @property
    def children(self) -> tuple["View", ...]:
        return tuple(self._children)

    @property
    def config(self) -> dict[str, Any]:
        return dict(self._config)

    @property
    def element(self) -> ET.Element:
        return self._element

    def _on_model_changed(self, *_args: object) -> None:
        self.render()

    def configure(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Merge options into this view's configuration. Does not render."""
        self._config.update(options or {}, **kwargs)

    def render(self) -> None:
        """Rebuild :attr:`element` from the model and configuration. Subclasses implement this."""

    def dispatch(self, dom_event: str, *args: object) -> bool:
        """
        Emit the view event for a browser event name, passing this view first.

        Returns False when the browser event has no view counterpart.
        """
        event = DOM_EVENTS.get(dom_event)
        if event is None:
            logger.debug("Ignoring browser event %r on %r", dom_event, self)
            return False
        self.emit(event, self, *args)
        return True
