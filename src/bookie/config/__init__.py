"""Configuration module using Pydantic Settings.

Usage:
    from bookie.config import StoreSettings

    settings = StoreSettings(freeze_sequences=False)
"""

from bookie.config.settings import StoreSettings

__all__ = [
    "StoreSettings",
]
