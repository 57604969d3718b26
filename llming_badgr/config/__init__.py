"""Configuration of the AI Badgr integration."""
from .aibadgr_settings import (
    AIBADGR_API_KEY_ENV,
    AIBADGR_BASE_URL,
    AIBADGR_BASE_URL_ENV,
    AIBADGR_DEFAULT_MODEL,
    AIBadgrConfigError,
    AIBadgrSettings,
)

__all__ = [
    "AIBADGR_API_KEY_ENV",
    "AIBADGR_BASE_URL",
    "AIBADGR_BASE_URL_ENV",
    "AIBADGR_DEFAULT_MODEL",
    "AIBadgrConfigError",
    "AIBadgrSettings",
]
