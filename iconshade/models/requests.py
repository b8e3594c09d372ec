"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class VariantsRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    fill: str | None = Field(default=None, description="Fill color: hex (#rgb, #rrggbb, ...) or none")
    stroke: str | None = Field(default=None, description="Stroke color: hex or none")
    preserve_fill_none: bool = Field(default=True, description="Keep existing fill=\"none\" values")
    preserve_stroke_none: bool = Field(default=True, description="Keep existing stroke=\"none\" values")
    generate_inactive: bool = True
    inactive_mix: float | None = Field(default=None, description="0 = subtle, 1 = very pale")
    corner_radius: float | None = None
    inset_ratio: float | None = None


class ColorValidateRequest(BaseModel):
    color: str


class InactivePreviewRequest(BaseModel):
    color: str = Field(..., description="Base hex color")
    inactive_mix: float | None = None
