from playing_cards.card_supplier.card_supplier import CardSupplier, visual_key, BACK_KEY
from playing_cards.card_supplier.svg_cards import SVGCardsCardSupplier
from playing_cards.card_supplier.images import ImageCardSupplier
from playing_cards.errors import ConfigurationError

_SUPPLIERS = {
    "svg-cards": SVGCardsCardSupplier,
    "images": ImageCardSupplier,
}


def resolve_supplier(name: str, **options) -> CardSupplier:
    """Build the card supplier registered under ``name`` with ``options``."""
    try:
        factory = _SUPPLIERS[name]
    except KeyError:
        raise ConfigurationError(f"Unknown card supplier '{name}'") from None
    return factory(**options)


__all__ = [
    "BACK_KEY",
    "CardSupplier",
    "ImageCardSupplier",
    "SVGCardsCardSupplier",
    "resolve_supplier",
    "visual_key",
]
