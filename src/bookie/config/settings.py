"""Configuration settings using Pydantic Settings.

Provides typed store configuration with environment variable support.

Usage:
    from bookie.config import StoreSettings

    # Load from environment variables (BOOKIE_*)
    settings = StoreSettings()

    # Or override with explicit values
    settings = StoreSettings(warn_unprotected=False)
    store = create_store({}, settings=settings)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for how a store publishes state snapshots.

    Attributes:
        warn_unprotected: Emit UnprotectedStateWarning when a published value
            cannot be write-protected (e.g. a plain mutable object).
        freeze_sequences: Publish list/set/bytearray states as
            tuple/frozenset/bytes.

    Environment Variables:
        BOOKIE_WARN_UNPROTECTED
        BOOKIE_FREEZE_SEQUENCES
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKIE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    warn_unprotected: bool = Field(default=True)
    freeze_sequences: bool = Field(default=True)
