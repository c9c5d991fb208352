"""Small helpers for building SVG element trees with ElementTree."""

import xml.etree.ElementTree as ET

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value: object) -> str:
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text
    return str(value)


def element(tag: str, **attributes: object) -> ET.Element:
    """Create an element; ``class_`` maps to ``class`` and ``_`` to ``-`` in names."""
    attrs = {
        name.rstrip("_").replace("_", "-"): fmt(value)
        for name, value in attributes.items()
        if value is not None
    }
    return ET.Element(tag, attrs)


def svg(width: float, height: float, **attributes: object) -> ET.Element:
    return element(
        "svg",
        xmlns=SVG_NS,
        width=width,
        height=height,
        viewBox=f"0 0 {fmt(width)} {fmt(height)}",
        **attributes,
    )


def group(**attributes: object) -> ET.Element:
    return element("g", **attributes)


def rect(x: float, y: float, width: float, height: float, **attributes: object) -> ET.Element:
    return element("rect", x=x, y=y, width=width, height=height, **attributes)


def use(href: str, **attributes: object) -> ET.Element:
    return element("use", href=href, **attributes)


def image(href: str, width: float, height: float, **attributes: object) -> ET.Element:
    return element("image", href=href, width=width, height=height, **attributes)


def transform(x: float = 0, y: float = 0, rotation: float = 0) -> str | None:
    parts = []
    if x or y:
        parts.append(f"translate({fmt(float(x))} {fmt(float(y))})")
    if rotation:
        parts.append(f"rotate({fmt(float(rotation))})")
    return " ".join(parts) or None


def clear(node: ET.Element) -> None:
    """Remove the children of ``node`` but keep the node itself and its attributes."""
    for child in list(node):
        node.remove(child)


def to_string(node: ET.Element) -> str:
    return ET.tostring(node, encoding="unicode")
