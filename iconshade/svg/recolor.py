"""Fill/stroke recoloring over raw SVG text.

Three surfaces carry color and each gets its own pass:

- XML attributes: ``fill="#000"``
- inline style attributes: ``style="fill:#000; stroke-width:2"``
- ``<style>`` blocks: ``.a { fill: #000; }``

Passes run in that order, each over the whole document. No DOM is built; only
these textual patterns are touched, everything else stays byte-identical.
Comments inside <style> blocks are not special-cased.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache

from iconshade.color.value import ColorToken, is_none_value
from iconshade.models.variants import ColorProperty, RecolorRequest

logger = logging.getLogger(__name__)

_STYLE_ATTR_RE = re.compile(r'(?<![\w:-])(style\s*=\s*")([^"]*)"', re.IGNORECASE)
_STYLE_BLOCK_RE = re.compile(r"(<style[^>]*>)(.*?)(</style\s*>)", re.IGNORECASE | re.DOTALL)


@lru_cache(maxsize=None)
def _attribute_re(prop: str) -> re.Pattern[str]:
    # The lookbehind keeps data-fill / inkscape:fill style names out.
    return re.compile(rf'(?<![\w:-])({prop}\s*=\s*")([^"]*)"', re.IGNORECASE)


@lru_cache(maxsize=None)
def _declaration_re(prop: str) -> re.Pattern[str]:
    # (?!-) so fill never matches fill-opacity / fill-rule
    # Trailing whitespace before ; or } stays outside the value group.
    # The value must end a declaration, so selectors like .fill:hover { are skipped.
    return re.compile(
        rf"(?<![\w-])({prop})(?!-)\s*:\s*([^;{{}}\s](?:[^;{{}}]*[^;{{}}\s])?)(?=\s*(?:[;}}]|$))",
        re.IGNORECASE,
    )


def _keep_existing(value: str, color: str, preserve_none: bool) -> bool:
    """Preserve-none rule: an explicit ``none`` survives unless ``none`` is the target."""
    return preserve_none and is_none_value(value) and not is_none_value(color)


def replace_attributes(svg_text: str, prop: ColorProperty, color: str, preserve_none: bool) -> str:
    """Rewrite ``prop="value"`` XML attributes."""

    def _sub(m: re.Match[str]) -> str:
        if _keep_existing(m.group(2), color, preserve_none):
            return m.group(0)
        return f'{m.group(1)}{color}"'

    return _attribute_re(prop).sub(_sub, svg_text)


def replace_inline_styles(svg_text: str, prop: ColorProperty, color: str, preserve_none: bool) -> str:
    """Rewrite ``prop`` declarations inside ``style="..."`` attributes.

    A changed attribute is re-emitted with declarations joined by ``"; "``.
    Attributes without a matching declaration are left exactly as they were.
    """

    def _sub(m: re.Match[str]) -> str:
        declarations = [d.strip() for d in m.group(2).split(";") if d.strip()]
        if not declarations:
            return m.group(0)

        changed = False
        updated: list[str] = []
        for decl in declarations:
            name, sep, value = decl.partition(":")
            name = name.strip()
            if not sep or not name or name.lower() != prop:
                updated.append(decl)
                continue
            if _keep_existing(value, color, preserve_none):
                updated.append(decl)
                continue
            changed = True
            updated.append(f"{name}:{color}")

        if not changed:
            return m.group(0)
        return f'{m.group(1)}{"; ".join(updated)}"'

    return _STYLE_ATTR_RE.sub(_sub, svg_text)


def replace_style_blocks(svg_text: str, prop: ColorProperty, color: str, preserve_none: bool) -> str:
    """Rewrite ``prop: value`` declarations inside ``<style>`` blocks."""
    decl_re = _declaration_re(prop)

    def _sub_decl(m: re.Match[str]) -> str:
        if _keep_existing(m.group(2), color, preserve_none):
            return m.group(0)
        return f"{m.group(1)}:{color}"

    def _sub_block(m: re.Match[str]) -> str:
        body = m.group(2)
        updated = decl_re.sub(_sub_decl, body)
        if updated == body:
            return m.group(0)
        return f"{m.group(1)}{updated}{m.group(3)}"

    return _STYLE_BLOCK_RE.sub(_sub_block, svg_text)


def recolor(svg_text: str, prop: ColorProperty, color: ColorToken | str, preserve_none: bool = True) -> str:
    """Apply ``color`` to every ``prop`` occurrence across all three surfaces."""
    color_text = str(color)
    result = replace_attributes(svg_text, prop, color_text, preserve_none)
    result = replace_inline_styles(result, prop, color_text, preserve_none)
    result = replace_style_blocks(result, prop, color_text, preserve_none)
    if result != svg_text:
        logger.debug("Recolored %s -> %s (preserve_none=%s)", prop, color_text, preserve_none)
    return result


def apply_requests(svg_text: str, requests: Iterable[RecolorRequest]) -> str:
    result = svg_text
    for req in requests:
        result = recolor(result, req.property, req.color, req.preserve_none)
    return result


def requests_for(
    fill: ColorToken | None,
    stroke: ColorToken | None,
    preserve_fill_none: bool = True,
    preserve_stroke_none: bool = True,
) -> list[RecolorRequest]:
    """Fill-then-stroke request list, skipping whichever color is absent."""
    requests: list[RecolorRequest] = []
    if fill is not None:
        requests.append(RecolorRequest(property="fill", color=fill, preserve_none=preserve_fill_none))
    if stroke is not None:
        requests.append(RecolorRequest(property="stroke", color=stroke, preserve_none=preserve_stroke_none))
    return requests
