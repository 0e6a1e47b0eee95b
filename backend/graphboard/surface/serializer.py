"""Write SVG frames from primitive element definitions."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

# Keys in an element dict that are not SVG attributes.
_META_KEYS = ("tag", "text", "background")


def _attr_str(elem: dict[str, Any]) -> str:
    return " ".join(f"{k}={quoteattr(str(v))}" for k, v in elem.items() if k not in _META_KEYS)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 800.0,
    canvas_h: float = 600.0,
    background: str | None = None,
    title: str = "",
) -> str:
    """Generate SVG markup for one rendered frame, elements in z-order."""
    lines = [
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" width="{canvas_w:g}" height="{canvas_h:g}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if background:
        lines.append(f'  <rect x="0" y="0" width="100%" height="100%" fill={quoteattr(background)} />')

    for elem in elements:
        tag = elem.get("tag", "path")
        backdrop = elem.get("background")
        if backdrop:
            lines.append(f"  <{backdrop['tag']} {_attr_str(backdrop)} />")
        if "text" in elem:
            lines.append(f"  <{tag} {_attr_str(elem)}>{escape(elem['text'])}</{tag}>")
        else:
            lines.append(f"  <{tag} {_attr_str(elem)} />")

    lines.append("</svg>")
    return "\n".join(lines)
