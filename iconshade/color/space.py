"""RGB <-> HSL transforms and the inactive palette derived from them.

The inactive foreground keeps the base hue but loses saturation and gains
lightness in proportion to the mix ratio. The inactive background only blends
lightness toward a pale gray, so it stays legible whatever the foreground hue.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from iconshade.color.value import ColorToken, Rgba, format_hex
from iconshade.errors import InvalidColor

logger = logging.getLogger(__name__)

# Desaturation and lightening at mix ratio 0; the same amount again is added at ratio 1.
_BASE_DESATURATION = 0.3
_BASE_LIGHT_BOOST = 0.2
# Alpha loses up to 10% at mix ratio 1.
_ALPHA_FADE = 0.1
# Lightness the inactive background approaches as the mix ratio reaches 1.
_BACKGROUND_LIGHTNESS = 0.85


@dataclass(frozen=True)
class Hsla:
    h: float  # degrees, [0, 360)
    s: float
    l: float
    a: float  # 0..1


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _channel(value: float) -> int:
    return int(clamp(_round_half_up(value), 0, 255))


def rgb_to_hsl(color: Rgba) -> Hsla:
    r = color.r / 255
    g = color.g / 255
    b = color.b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    if delta != 0:
        # Ties go to the first of r, g, b. fmod keeps the sign; negatives wrap below.
        if max_c == r:
            h = math.fmod((g - b) / delta, 6)
        elif max_c == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h *= 60
        if h < 0:
            h += 360

    l = (max_c + min_c) / 2
    s = 0.0 if delta == 0 else delta / (1 - abs(2 * l - 1))
    return Hsla(h=h, s=s, l=l, a=color.a / 255)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(color: Hsla) -> Rgba:
    h = color.h / 360
    s = clamp01(color.s)
    l = clamp01(color.l)
    a = _channel(clamp01(color.a) * 255)

    if s == 0:
        gray = _channel(l * 255)
        return Rgba(gray, gray, gray, a)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return Rgba(
        _channel(_hue_to_rgb(p, q, h + 1 / 3) * 255),
        _channel(_hue_to_rgb(p, q, h) * 255),
        _channel(_hue_to_rgb(p, q, h - 1 / 3) * 255),
        a,
    )


def inactive_hsla(base: Hsla, mix_ratio: float) -> Hsla:
    """Shift an HSLA color toward the pale, low-saturation inactive look."""
    ratio = clamp01(mix_ratio)
    desaturation = _BASE_DESATURATION + _BASE_DESATURATION * ratio
    light_boost = _BASE_LIGHT_BOOST + _BASE_LIGHT_BOOST * ratio
    return Hsla(
        h=base.h,
        s=clamp01(base.s * (1 - desaturation)),
        l=clamp01(base.l + light_boost),
        a=clamp01(base.a * (1 - _ALPHA_FADE * ratio)),
    )


def derive_inactive_color(color: ColorToken, mix_ratio: float) -> ColorToken:
    """Desaturated, lightened counterpart of ``color``. ``none`` passes through."""
    if color.rgba is None:
        return color

    shifted = hsl_to_rgb(inactive_hsla(rgb_to_hsl(color.rgba), mix_ratio))
    text = format_hex(shifted, color.explicit_alpha)
    logger.debug("Inactive color for %s at mix %.2f: %s", color.text, mix_ratio, text)
    return ColorToken(text=text, rgba=shifted, explicit_alpha=color.explicit_alpha)


def derive_inactive_background(color: ColorToken, mix_ratio: float) -> ColorToken:
    """Opaque neutral gray whose lightness blends toward 0.85 with the mix ratio."""
    if color.rgba is None:
        raise InvalidColor(color.text)

    ratio = clamp01(mix_ratio)
    lightness = rgb_to_hsl(color.rgba).l
    target = clamp01(lightness * (1 - ratio) + _BACKGROUND_LIGHTNESS * ratio)
    gray = hsl_to_rgb(Hsla(h=0.0, s=0.0, l=target, a=1.0))
    return ColorToken(text=format_hex(gray, False), rgba=gray)
