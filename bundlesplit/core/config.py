"""
Configuration management for bundlesplit.

Provides type-safe configuration with environment variable overrides and
defaults matching the behaviour of the splitters when no policy is given.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class SplitterConfig(BaseModel):
    """Policy switches for the dimension splitters."""

    include_64_bit_libs: bool = Field(
        default=True,
        description="Generate splits for 64-bit ABIs (arm64-v8a, x86_64, mips64)",
    )


class Config(BaseModel):
    """Root configuration for bundlesplit."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    splitter: SplitterConfig = Field(default_factory=SplitterConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        return cls(
            log_level=os.environ.get("BUNDLESPLIT_LOG_LEVEL", "INFO").upper(),  # type: ignore
            splitter=SplitterConfig(
                include_64_bit_libs=_env_flag("BUNDLESPLIT_INCLUDE_64_BIT", True),
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
