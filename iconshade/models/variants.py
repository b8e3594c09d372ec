"""Value models for recolor directives, generation options and rendered variants."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from iconshade.color.value import ColorToken
from iconshade.engine.config import VariantDefaults

ColorProperty = Literal["fill", "stroke"]

_DEFAULTS = VariantDefaults()


class RecolorRequest(BaseModel):
    """One recolor directive applied to SVG text for one property."""

    model_config = ConfigDict(frozen=True)

    property: ColorProperty
    color: ColorToken
    preserve_none: bool = True


class GenerationOptions(BaseModel):
    """Complete configuration for one generate_variants() call.

    Ratios and radius are clamped by the generator, not rejected here.
    """

    model_config = ConfigDict(frozen=True)

    svg_content: str
    fill: ColorToken | None = None
    stroke: ColorToken | None = None
    preserve_fill_none: bool = True
    preserve_stroke_none: bool = True
    generate_inactive: bool = True
    inactive_mix: float = Field(default=_DEFAULTS.inactive_mix, description="Inactive mix ratio, 0..1")
    corner_radius: float = Field(default=_DEFAULTS.corner_radius, description="Background corner radius, >= 0")
    inset_ratio: float = Field(default=_DEFAULTS.inset_ratio, description="Background inset ratio, 0..0.9")


class IconVariant(BaseModel):
    """One fully rendered output icon."""

    model_config = ConfigDict(frozen=True)

    name: str
    svg: str
    fill: ColorToken | None = None
    stroke: ColorToken | None = None
    background_color: ColorToken | None = None
