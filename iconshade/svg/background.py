"""Rounded background rect injected behind inactive icons.

The rect is the first child of the root <svg> and carries a marker attribute
so a second injection replaces it instead of stacking another one.
"""

from __future__ import annotations

import logging
import re

from iconshade.color.space import clamp
from iconshade.color.value import ColorToken
from iconshade.engine.config import VariantDefaults
from iconshade.svg.parser import ViewBox, extract_viewbox, require_svg_root

logger = logging.getLogger(__name__)

BACKGROUND_MARKER = 'data-iconshade-inactive-bg="true"'

_MARKED_RECT_RE = re.compile(rf"<rect[^>]*{re.escape(BACKGROUND_MARKER)}[^>]*/>", re.IGNORECASE)

_MAX_INSET = VariantDefaults().max_inset_ratio


def format_number(value: float) -> str:
    """Whole numbers without a decimal part, otherwise at most 4 decimals, no trailing zeros."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def clamp_inset(inset_ratio: float) -> float:
    return clamp(inset_ratio, 0.0, _MAX_INSET)


def build_background_rect(
    viewbox: ViewBox | None,
    color: ColorToken | str,
    corner_radius: float,
    inset_ratio: float,
) -> str:
    inset = clamp_inset(inset_ratio)
    radius = format_number(max(corner_radius, 0.0))

    if viewbox is not None:
        width = viewbox.width * (1 - inset)
        height = viewbox.height * (1 - inset)
        x = format_number(viewbox.min_x + (viewbox.width - width) / 2)
        y = format_number(viewbox.min_y + (viewbox.height - height) / 2)
        w = format_number(width)
        h = format_number(height)
    else:
        offset = format_number(inset * 100 / 2) + "%"
        size = format_number(100 - inset * 100) + "%"
        x, y, w, h = offset, offset, size, size

    return (
        f'<rect {BACKGROUND_MARKER} x="{x}" y="{y}" width="{w}" height="{h}" '
        f'rx="{radius}" ry="{radius}" fill="{color}"/>'
    )


def inject_background(
    svg_text: str,
    color: ColorToken | str,
    corner_radius: float,
    inset_ratio: float,
) -> str:
    """Insert or replace the marked background rect.

    Raises InvalidSvgDocument when no root <svg> tag can be found.
    """
    root = require_svg_root(svg_text)
    viewbox = extract_viewbox(svg_text)
    if viewbox is None:
        logger.debug("No usable viewBox, background rect uses percentage units")
    rect = build_background_rect(viewbox, color, corner_radius, inset_ratio)

    existing = _MARKED_RECT_RE.search(svg_text)
    if existing:
        return svg_text[: existing.start()] + rect + svg_text[existing.end():]

    tag = root.group(0)
    if tag.endswith("/>"):
        # Self-closing root: reopen it as a start/end pair around the rect.
        logger.debug("Expanding self-closing <svg> root to hold the background rect")
        opened = tag[:-2].rstrip() + ">"
        return svg_text[: root.start()] + opened + "\n  " + rect + "\n</svg>" + svg_text[root.end():]

    return svg_text[: root.end()] + "\n  " + rect + svg_text[root.end():]
