"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from iconshade.engine.config import VariantDefaults


class Settings(BaseSettings):
    iconshade_env: str = "development"
    iconshade_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Inactive variant defaults for HTTP and CLI callers
    default_inactive_mix: float = 0.5
    default_corner_radius: float = 6.0
    default_inset_ratio: float = 0.1

    # CLI output directory when --output is not given
    output_dir: str = "output"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def variant_defaults(self) -> VariantDefaults:
        return VariantDefaults(
            inactive_mix=self.default_inactive_mix,
            corner_radius=self.default_corner_radius,
            inset_ratio=self.default_inset_ratio,
        )


settings = Settings()
