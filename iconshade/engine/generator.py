"""Variant generation — the single entry point collaborators call.

GenerationOptions in, ``[active, inactive?]`` out. Either the full list is
returned or an error is raised; there are no partial results.
"""

from __future__ import annotations

import logging

from iconshade.color.space import clamp01, derive_inactive_background, derive_inactive_color
from iconshade.color.value import ColorToken, parse_color
from iconshade.engine.config import VariantDefaults
from iconshade.models.variants import GenerationOptions, IconVariant
from iconshade.svg.background import inject_background
from iconshade.svg.parser import require_svg_root
from iconshade.svg.recolor import apply_requests, requests_for

logger = logging.getLogger(__name__)

ACTIVE = "active"
INACTIVE = "inactive"


def pick_primary_color(fill: ColorToken | None, stroke: ColorToken | None) -> ColorToken | None:
    """Fill if usable, else stroke if usable; ``none`` never counts."""
    for color in (fill, stroke):
        if color is not None and not color.is_none:
            return color
    return None


def _inactive(color: ColorToken | None, mix: float) -> ColorToken | None:
    if color is None:
        return None
    return derive_inactive_color(color, mix)


def generate_variants(options: GenerationOptions) -> list[IconVariant]:
    require_svg_root(options.svg_content)

    active_svg = apply_requests(
        options.svg_content,
        requests_for(options.fill, options.stroke, options.preserve_fill_none, options.preserve_stroke_none),
    )
    variants = [IconVariant(name=ACTIVE, svg=active_svg, fill=options.fill, stroke=options.stroke)]

    if options.generate_inactive:
        mix = clamp01(options.inactive_mix)
        inactive_fill = _inactive(options.fill, mix)
        inactive_stroke = _inactive(options.stroke, mix)

        primary = pick_primary_color(options.fill, options.stroke)
        background = derive_inactive_background(primary, mix) if primary is not None else None

        # Recolor before injecting so the background rect's own fill is left alone.
        inactive_svg = apply_requests(
            options.svg_content,
            requests_for(inactive_fill, inactive_stroke, options.preserve_fill_none, options.preserve_stroke_none),
        )
        if background is not None:
            inactive_svg = inject_background(inactive_svg, background, options.corner_radius, options.inset_ratio)
        else:
            logger.info("No fill or stroke color other than none, inactive variant has no background")

        variants.append(
            IconVariant(
                name=INACTIVE,
                svg=inactive_svg,
                fill=inactive_fill,
                stroke=inactive_stroke,
                background_color=background,
            )
        )

    logger.info("Generated %d variant(s): %s", len(variants), ", ".join(v.name for v in variants))
    return variants


def generate_variants_from_text(
    svg_content: str,
    fill: str | None = None,
    stroke: str | None = None,
    defaults: VariantDefaults | None = None,
    **kwargs,
) -> list[IconVariant]:
    """Parse color strings and fill in defaults, then generate_variants().

    Blank color strings count as absent. Raises InvalidColor for bad colors.
    """
    defaults = defaults or VariantDefaults()
    for knob in ("inactive_mix", "corner_radius", "inset_ratio"):
        if kwargs.get(knob) is None:
            kwargs[knob] = getattr(defaults, knob)

    options = GenerationOptions(
        svg_content=svg_content,
        fill=parse_color(fill) if fill and fill.strip() else None,
        stroke=parse_color(stroke) if stroke and stroke.strip() else None,
        **kwargs,
    )
    return generate_variants(options)
