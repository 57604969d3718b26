"""Credential and endpoint resolution for the AI Badgr endpoint."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

AIBADGR_API_KEY_ENV = "AIBADGR_API_KEY"
"""Environment variable holding the default API key."""
AIBADGR_BASE_URL_ENV = "AIBADGR_BASE_URL"
"""Environment variable overriding the base URL."""
AIBADGR_BASE_URL = "https://aibadgr.com/api/v1"
"""Base URL of the OpenAI-compatible AI Badgr API."""
AIBADGR_DEFAULT_MODEL = "premium"
"""Model used when the caller does not name one."""


class AIBadgrConfigError(ValueError):
    """Raised when no AI Badgr API key can be resolved."""


@dataclass(frozen=True)
class AIBadgrSettings:
    """Resolved, immutable connection settings of an AI Badgr client."""
    api_key: str
    """The API key sent with every request."""
    base_url: str = AIBADGR_BASE_URL
    """Endpoint the wrapped client talks to."""
    model: str = AIBADGR_DEFAULT_MODEL
    """Tier, power-user alias or provider-native model name."""

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        aibadgr_api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AIBadgrSettings":
        """Resolve settings from explicit arguments and the environment.

        The API key is the first non-empty value of `api_key`, `aibadgr_api_key` and the
        AIBADGR_API_KEY environment variable. The base URL is `base_url`, then
        AIBADGR_BASE_URL, then the public AI Badgr endpoint.

        :param api_key: Explicit API key
        :param aibadgr_api_key: Legacy name of the API key argument
        :param model: Model name, defaults to AIBADGR_DEFAULT_MODEL
        :param base_url: Explicit base URL override
        :param environ: Environment to read, defaults to os.environ
        :return: The resolved settings
        :raises AIBadgrConfigError: If no API key is available
        """
        environ = os.environ if environ is None else environ
        resolved_key = api_key or aibadgr_api_key or environ.get(AIBADGR_API_KEY_ENV)
        if not resolved_key:
            raise AIBadgrConfigError(
                f"AI Badgr API key not found. Please set the {AIBADGR_API_KEY_ENV} environment variable "
                f'or pass the key into the "api_key" field.'
            )
        return cls(
            api_key=resolved_key,
            base_url=base_url or environ.get(AIBADGR_BASE_URL_ENV) or AIBADGR_BASE_URL,
            model=model or AIBADGR_DEFAULT_MODEL,
        )

    def __repr__(self) -> str:
        return f"AIBadgrSettings(api_key='***', base_url={self.base_url!r}, model={self.model!r})"
