"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconshade.models.variants import IconVariant


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class VariantResponse(BaseModel):
    name: str
    svg: str
    fill: str | None = None
    stroke: str | None = None
    background_color: str | None = None

    @classmethod
    def from_variant(cls, variant: IconVariant) -> VariantResponse:
        return cls(
            name=variant.name,
            svg=variant.svg,
            fill=str(variant.fill) if variant.fill is not None else None,
            stroke=str(variant.stroke) if variant.stroke is not None else None,
            background_color=str(variant.background_color) if variant.background_color is not None else None,
        )


class VariantsResponse(BaseModel):
    variants: list[VariantResponse] = Field(default_factory=list)


class ColorValidateResponse(BaseModel):
    valid: bool
    color: str | None = None
    error: str | None = None


class InactivePreviewResponse(BaseModel):
    color: str
    inactive: str
    background: str
    inactive_mix: float
