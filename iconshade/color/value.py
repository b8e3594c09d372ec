"""Color value model — hex RGB(A) tokens plus the keyword ``none``.

Accepted spellings: #rgb, #rgba, #rrggbb, #rrggbbaa (case-insensitive) and
``none``. Short forms expand each digit by duplication before channels are
read; alpha is only present in the 4- and 8-digit forms.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from iconshade.errors import InvalidColor

_HEX_COLOR_RE = re.compile(
    r"^#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$",
    re.IGNORECASE,
)

NONE_KEYWORD = "none"


@dataclass(frozen=True)
class Rgba:
    """Four 8-bit channels. Alpha 255 means fully opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value out of range: {channel}")


@dataclass(frozen=True)
class ColorToken:
    """A parsed color: either ``none`` (rgba is None) or an RGBA value.

    ``text`` is the trimmed input in its original casing and is what gets
    written into SVG markup. ``explicit_alpha`` remembers whether the textual
    form carried an alpha channel, so serialization keeps the same width.
    """

    text: str
    rgba: Rgba | None = None
    explicit_alpha: bool = False

    @property
    def is_none(self) -> bool:
        return self.rgba is None

    def to_hex(self) -> str:
        if self.rgba is None:
            return NONE_KEYWORD
        return format_hex(self.rgba, self.explicit_alpha)

    def __str__(self) -> str:
        return self.text


NONE_COLOR = ColorToken(text=NONE_KEYWORD)


def is_none_value(value: str) -> bool:
    return value.strip().lower() == NONE_KEYWORD


def parse_color(text: str) -> ColorToken:
    """Parse a color string into a ColorToken, raising InvalidColor on bad input."""
    trimmed = text.strip()
    if trimmed.lower() == NONE_KEYWORD:
        return NONE_COLOR

    match = _HEX_COLOR_RE.match(trimmed)
    if not match:
        raise InvalidColor(text)

    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    explicit_alpha = len(digits) == 8
    a = int(digits[6:8], 16) if explicit_alpha else 255

    return ColorToken(text=trimmed, rgba=Rgba(r, g, b, a), explicit_alpha=explicit_alpha)


def format_hex(rgba: Rgba, include_alpha: bool) -> str:
    """Serialize channels as lowercase #rrggbb, or #rrggbbaa with include_alpha."""
    out = f"#{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}"
    if include_alpha:
        out += f"{rgba.a:02x}"
    return out


def validate_color_input(text: str) -> str:
    """Normalize a user-supplied color string for collaborators (CLI, HTTP).

    Returns ``"none"`` or the trimmed hex literal; raises InvalidColor otherwise.
    """
    token = parse_color(text)
    return token.text if not token.is_none else NONE_KEYWORD
