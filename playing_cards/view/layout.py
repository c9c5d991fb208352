from dataclasses import dataclass
from enum import Enum
import logging
import math

from playing_cards.constants import (
    FAN_STEP_X,
    FAN_STEP_Y,
    ARC_STEP,
    ARC_MAX_SPAN,
    ARC_MIN_RADIUS,
    ARC_SPACING,
)

logger = logging.getLogger(__name__)


class FanStyle(str, Enum):
    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ARC = "arc"

    @classmethod
    def parse(cls, value: "FanStyle | str | None") -> "FanStyle":
        """Normalize a fan style; anything unrecognized becomes ``FanStyle.NONE``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        if value is not None:
            logger.warning("Unknown fan style %r, using %s", value, cls.NONE.value)
        return cls.NONE


@dataclass(frozen=True, slots=True)
class Placement:
    """Offset and rotation (degrees) of a card relative to its pile's anchor."""

    dx: float = 0.0
    dy: float = 0.0
    angle: float = 0.0


def _arc(count: int) -> list[Placement]:
    if count == 1:
        return [Placement()]
    span = math.radians(min(ARC_MAX_SPAN, (count - 1) * ARC_STEP))
    radius = max(ARC_MIN_RADIUS, (count - 1) * ARC_SPACING / span)
    placements = []
    for i in range(count):
        # Circle center sits ``radius`` below the anchor, so the middle card is at the anchor
        theta = -span / 2 + span * i / (count - 1)
        placements.append(
            Placement(
                dx=radius * math.sin(theta),
                dy=radius * (1 - math.cos(theta)),
                angle=math.degrees(theta),
            )
        )
    return placements


def fan_layout(style: FanStyle, count: int) -> list[Placement]:
    """Placements for ``count`` cards, bottom card first."""
    if count <= 0:
        return []
    if style is FanStyle.UP:
        return [Placement(dy=-i * FAN_STEP_Y) for i in range(count)]
    if style is FanStyle.DOWN:
        return [Placement(dy=i * FAN_STEP_Y) for i in range(count)]
    if style is FanStyle.LEFT:
        return [Placement(dx=-i * FAN_STEP_X) for i in range(count)]
    if style is FanStyle.RIGHT:
        return [Placement(dx=i * FAN_STEP_X) for i in range(count)]
    if style is FanStyle.ARC:
        return _arc(count)
    return [Placement() for _ in range(count)]


def place(placement: Placement, x: float = 0, y: float = 0, rotation: float = 0) -> Placement:
    """Apply a pile's rotation (degrees, about its anchor) and position to a placement."""
    rad = math.radians(rotation)
    cos, sin = math.cos(rad), math.sin(rad)
    return Placement(
        dx=x + placement.dx * cos - placement.dy * sin,
        dy=y + placement.dx * sin + placement.dy * cos,
        angle=placement.angle + rotation,
    )
