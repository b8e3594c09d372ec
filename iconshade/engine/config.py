"""Variant generation defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VariantDefaults:
    """Documented defaults for the inactive variant knobs."""

    # Strength of the desaturate/lighten shift (0 = subtle, 1 = very pale)
    inactive_mix: float = 0.5
    # rx/ry of the injected background rect, in viewBox units
    corner_radius: float = 6.0
    # Fraction of the icon box the background shrinks inward
    inset_ratio: float = 0.1

    # Bounds used when clamping caller input
    max_inset_ratio: float = 0.9
