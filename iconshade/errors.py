"""Error types raised by the recoloring core."""

from __future__ import annotations

ACCEPTED_COLOR_FORMATS = "#rgb, #rgba, #rrggbb, #rrggbbaa or the keyword none"


class IconShadeError(ValueError):
    """Base class for all core failures."""


class InvalidColor(IconShadeError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unsupported color value: {value}. Use {ACCEPTED_COLOR_FORMATS}.")


class InvalidSvgDocument(IconShadeError):
    def __init__(self, message: str = "Input is not a valid SVG document.") -> None:
        super().__init__(message)
