from playing_cards import svg
from playing_cards.card_supplier.card_supplier import CardSupplier
from playing_cards.card_supplier.svg_cards import SVGCardsCardSupplier
from playing_cards.constants import (
    CARD_W,
    CARD_H,
    PILE_CLASS,
    CARD_CLASS,
    OUTLINE_CLASS,
    PILE_OUTLINE,
    PILE_OUTLINE_WIDTH,
    PILE_OUTLINE_DASH,
)
from playing_cards.model.pile_model import PileModel
from playing_cards.view.layout import FanStyle, Placement, fan_layout, place
from playing_cards.view.view import View


def _size(visual) -> tuple[float, float]:
    try:
        return float(visual.get("width", CARD_W)), float(visual.get("height", CARD_H))
    except ValueError:
        return float(CARD_W), float(CARD_H)


class PileView(View):
    """
    Shows a pile as a ``<g>`` of cards fanned around the pile's anchor.

    The anchor is the center of the bottom card. Position, fanning and
    rotation live in the configuration; changing them does not render, the
    owner calls :meth:`render` afterwards.
    """

    def __init__(
        self,
        parent: View | None,
        model: PileModel,
        x: float = 0,
        y: float = 0,
        fanning: FanStyle | str = FanStyle.NONE,
        rotation: float = 0,
        supplier: CardSupplier | None = None,
    ):
        super().__init__(
            parent,
            model,
            {"x": x, "y": y, "fanning": FanStyle.parse(fanning), "rotation": rotation},
        )
        self.supplier = supplier or getattr(parent, "supplier", None) or SVGCardsCardSupplier()
        self.render()

    @property
    def fanning(self) -> FanStyle:
        return FanStyle.parse(self._config.get("fanning"))

    def layout(self) -> list[Placement]:
        return fan_layout(self.fanning, self.model.count)

    def positions(self) -> list[Placement]:
        """Card placements in table coordinates."""
        x, y, rotation = self._config["x"], self._config["y"], self._config["rotation"]
        return [place(p, x, y, rotation) for p in self.layout()]

    def render(self) -> None:
        node = self.element
        svg.clear(node)
        node.attrib.clear()
        node.set("class", PILE_CLASS)
        transform = svg.transform(self._config["x"], self._config["y"], self._config["rotation"])
        if transform:
            node.set("transform", transform)

        node.append(
            svg.rect(
                -CARD_W / 2,
                -CARD_H / 2,
                CARD_W,
                CARD_H,
                class_=OUTLINE_CLASS,
                fill="none",
                stroke=PILE_OUTLINE,
                stroke_width=PILE_OUTLINE_WIDTH,
                stroke_dasharray=PILE_OUTLINE_DASH,
            )
        )
        for card, placement in zip(self.model.each(), self.layout()):
            card_node = svg.group(
                class_=CARD_CLASS,
                transform=svg.transform(placement.dx, placement.dy, placement.angle),
            )
            visual = self.supplier.create_card(card)
            # centered on the placement whatever size the supplier draws
            width, height = _size(visual)
            visual.set("x", svg.fmt(-width / 2))
            visual.set("y", svg.fmt(-height / 2))
            card_node.append(visual)
            node.append(card_node)

    def __repr__(self) -> str:
        return f"PileView({self.model!r}, fanning={self.fanning.value})"
