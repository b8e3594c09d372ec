"""IconShade: active/inactive SVG icon recoloring."""

__version__ = "0.1.0"
