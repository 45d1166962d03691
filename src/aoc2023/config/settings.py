"""Environment-driven application settings.

All values are loaded from environment variables (prefix ``AOC_``) or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runner configuration."""

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    verbose: bool = Field(default=False)
    """Emit debug-level diagnostics around every harness step."""

    input_dir: Path = Field(default=Path("inputs"))
    """Directory holding ``<day>.txt`` files used when no input path is given."""

    def default_input_path(self, day: str) -> Path:
        """Conventional input location for *day*."""
        return self.input_dir / f"{day}.txt"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings instance (read once from the environment)."""
    return Settings()
