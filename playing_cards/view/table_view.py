from playing_cards import svg
from playing_cards.card_supplier.card_supplier import CardSupplier
from playing_cards.card_supplier.svg_cards import SVGCardsCardSupplier
from playing_cards.constants import TABLE_W, TABLE_H, TABLE_BG, TABLE_CLASS
from playing_cards.model.table_model import TableModel
from playing_cards.view.view import View


class TableView(View):
    """
    The root view: an ``<svg>`` element holding the views of the piles on the table.

    Only child views whose model is one of the table's piles are drawn.
    """

    tag = "svg"

    def __init__(
        self,
        model: TableModel,
        width: float = TABLE_W,
        height: float = TABLE_H,
        supplier: CardSupplier | None = None,
        background: str = TABLE_BG,
    ):
        super().__init__(None, model, {"width": width, "height": height, "background": background})
        self.supplier = supplier or SVGCardsCardSupplier()
        self.render()

    def render(self) -> None:
        node = self.element
        svg.clear(node)
        width, height = self._config["width"], self._config["height"]
        node.attrib.clear()
        node.attrib.update(svg.svg(width, height, class_=TABLE_CLASS).attrib)
        node.append(svg.rect(0, 0, width, height, fill=self._config["background"]))
        on_table = self.model.piles.values()
        for child in self.children:
            if not any(child.model is pile for pile in on_table):
                continue
            child.render()
            node.append(child.element)

    def to_svg(self) -> str:
        self.render()
        return svg.to_string(self.element)

    def __repr__(self) -> str:
        return f"TableView({len(self.children)} views)"
