"""IconShade variant generation engine."""

from iconshade.engine.config import VariantDefaults

__all__ = ["VariantDefaults"]
