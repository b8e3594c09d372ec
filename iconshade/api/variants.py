"""POST /api/variants — active/inactive icon generation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from iconshade.config import Settings
from iconshade.dependencies import get_settings
from iconshade.engine.generator import generate_variants_from_text
from iconshade.errors import IconShadeError
from iconshade.models.requests import VariantsRequest
from iconshade.models.responses import VariantResponse, VariantsResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/variants", response_model=VariantsResponse)
async def create_variants(
    req: VariantsRequest,
    settings: Settings = Depends(get_settings),
) -> VariantsResponse:
    if not (req.fill and req.fill.strip()) and not (req.stroke and req.stroke.strip()):
        raise HTTPException(status_code=422, detail="Provide at least one of fill or stroke")

    try:
        variants = generate_variants_from_text(
            req.svg,
            fill=req.fill,
            stroke=req.stroke,
            defaults=settings.variant_defaults(),
            preserve_fill_none=req.preserve_fill_none,
            preserve_stroke_none=req.preserve_stroke_none,
            generate_inactive=req.generate_inactive,
            inactive_mix=req.inactive_mix,
            corner_radius=req.corner_radius,
            inset_ratio=req.inset_ratio,
        )
    except IconShadeError as e:
        logger.info("Variant generation rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return VariantsResponse(variants=[VariantResponse.from_variant(v) for v in variants])
