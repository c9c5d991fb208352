from collections.abc import Callable, Iterable
from enum import Enum
import logging

from playing_cards.errors import UnknownEventError

logger = logging.getLogger(__name__)

EventHandler = Callable[..., object]


class EventAware:
    """
    Base class for objects that emit events.

    The set of emittable events is fixed when the object is created. Handlers
    can only be installed or removed for those events; emitting any other
    event does nothing.

    Parameters
    ----------
    emittable_events : Iterable[Enum]
        The events this object can emit.
    """

    def __init__(self, emittable_events: Iterable[Enum] = ()):
        self._event_handlers: dict[Enum, list[EventHandler]] = {
            event: [] for event in emittable_events
        }

    @property
    def events(self) -> frozenset[Enum]:
        return frozenset(self._event_handlers)

    def handlers(self, event: Enum) -> tuple[EventHandler, ...]:
        if event not in self._event_handlers:
            raise UnknownEventError(self, event)
        return tuple(self._event_handlers[event])

    def on(self, event: Enum, handler: EventHandler) -> None:
        """Install ``handler`` for ``event``; handlers run in the order they were installed."""
        if event not in self._event_handlers:
            raise UnknownEventError(self, event)
        self._event_handlers[event].append(handler)

    def off(self, event: Enum, handler: EventHandler | None = None) -> None:
        """
        Remove ``handler`` for ``event``.

        Without a handler every handler installed for ``event`` is removed.
        Removing a handler that is not installed does nothing.
        """
        if event not in self._event_handlers:
            raise UnknownEventError(self, event)
        if handler is None:
            self._event_handlers[event] = []
            return
        handlers = self._event_handlers[event]
        if handler in handlers:
            handlers.remove(handler)

    subscribe = on
    unsubscribe = off

    def emit(self, event: Enum, *args: object) -> None:
        """
        Call every handler installed for ``event`` with ``args``.

        Handlers run synchronously. An exception raised by a handler propagates
        to the caller and the remaining handlers are not called.
        """
        handlers = self._event_handlers.get(event)
        if handlers is None:
            logger.debug("%r does not emit %s; nothing to do", self, event)
            return
        for handler in list(handlers):
            handler(*args)
