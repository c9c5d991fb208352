class PlayingCardsError(Exception):
    """Base class for errors raised by playing_cards."""


class UnknownEventError(PlayingCardsError, LookupError):
    """Raised when (un)subscribing to an event an object does not emit."""

    def __init__(self, source: object, event: object):
        self.source = source
        self.event = event
        super().__init__(f"The event aware object '{source!r}' does not emit event '{event}'.")


class ConfigurationError(PlayingCardsError, ValueError):
    """Raised when a game element is constructed from an invalid specification."""
