"""POST /api/colors/* — color validation and inactive palette preview."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from iconshade.color.space import clamp01, derive_inactive_background, derive_inactive_color
from iconshade.color.value import parse_color, validate_color_input
from iconshade.config import Settings
from iconshade.dependencies import get_settings
from iconshade.errors import InvalidColor
from iconshade.models.requests import ColorValidateRequest, InactivePreviewRequest
from iconshade.models.responses import ColorValidateResponse, InactivePreviewResponse

router = APIRouter(prefix="/colors")


@router.post("/validate", response_model=ColorValidateResponse)
async def validate(req: ColorValidateRequest) -> ColorValidateResponse:
    try:
        return ColorValidateResponse(valid=True, color=validate_color_input(req.color))
    except InvalidColor as e:
        return ColorValidateResponse(valid=False, error=str(e))


@router.post("/inactive", response_model=InactivePreviewResponse)
async def inactive_preview(
    req: InactivePreviewRequest,
    settings: Settings = Depends(get_settings),
) -> InactivePreviewResponse:
    mix = settings.default_inactive_mix if req.inactive_mix is None else clamp01(req.inactive_mix)
    try:
        color = parse_color(req.color)
        if color.is_none:
            raise InvalidColor(req.color)
        inactive = derive_inactive_color(color, mix)
        background = derive_inactive_background(color, mix)
    except InvalidColor as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return InactivePreviewResponse(
        color=color.text,
        inactive=inactive.text,
        background=background.text,
        inactive_mix=mix,
    )
