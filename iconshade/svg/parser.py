"""Root tag and viewBox lookup over raw SVG text (no element tree)."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from iconshade.errors import InvalidSvgDocument

logger = logging.getLogger(__name__)

_SVG_OPEN_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_VIEWBOX_RE = re.compile(r'(?<![\w-])viewBox\s*=\s*"([^"]*)"', re.IGNORECASE)
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class ViewBox:
    min_x: float
    min_y: float
    width: float
    height: float


def find_root_tag(svg_text: str) -> re.Match[str] | None:
    """Locate the opening ``<svg ...>`` tag."""
    return _SVG_OPEN_TAG_RE.search(svg_text)


def require_svg_root(svg_text: str) -> re.Match[str]:
    m = find_root_tag(svg_text)
    if m is None:
        raise InvalidSvgDocument("Input is not a valid SVG document: no <svg> root element found.")
    return m


def extract_viewbox(svg_text: str) -> ViewBox | None:
    """Parse the root element's viewBox; None when absent or not four finite numbers."""
    root = find_root_tag(svg_text)
    if root is None:
        return None

    m = _VIEWBOX_RE.search(root.group(0))
    if not m:
        return None

    parts = [p for p in _VIEWBOX_SPLIT_RE.split(m.group(1).strip()) if p]
    if len(parts) != 4:
        logger.warning("Ignoring viewBox %r: expected 4 values, got %d", m.group(1), len(parts))
        return None

    try:
        values = [float(p) for p in parts]
    except ValueError:
        logger.warning("Ignoring non-numeric viewBox %r", m.group(1))
        return None
    if not all(math.isfinite(v) for v in values):
        logger.warning("Ignoring non-finite viewBox %r", m.group(1))
        return None

    return ViewBox(*values)
