"""AI Badgr provider implementation."""
import os
from typing import List, Optional

from llming_badgr.config import AIBADGR_API_KEY_ENV
from llming_badgr.providers import BaseProvider, register_provider
from llming_badgr.llm_base_client import LlmClient
from .aibadgr_models import AIBADGR_MODELS
from .aibadgr_client import ChatAIBadgr
from ..llm_provider_models import LLMInfo


@register_provider("aibadgr")
class AIBadgrProvider(BaseProvider):
    """AI Badgr provider implementation."""

    def __init__(self):
        """Initialize AI Badgr provider."""
        super().__init__("aibadgr", "AI Badgr")
        self._api_key = os.environ.get(AIBADGR_API_KEY_ENV)

    @property
    def is_available(self) -> bool:
        """Check if provider is available (has valid API key)."""
        return bool(self._api_key)

    def get_models(self) -> List[LLMInfo]:
        """Get list of AI Badgr tiers and power-user models."""
        return AIBADGR_MODELS

    def create_client(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        streaming: bool = False,
        base_url: Optional[str] = None,
        **kwargs
    ) -> LlmClient:
        """Create an AI Badgr chat model client.

        Args:
            model: Model name to use
            temperature: Temperature for responses
            max_tokens: Maximum tokens to generate
            streaming: Whether to stream responses
            base_url: Optional base URL for the API
            **kwargs: Additional arguments passed to ChatAIBadgr (top_p, stop, timeout, ...)

        Returns:
            Configured ChatAIBadgr instance

        Raises:
            ValueError: If AIBADGR_API_KEY environment variable is not set
        """
        if not self.is_available:
            raise ValueError(f"{AIBADGR_API_KEY_ENV} environment variable is not set")

        return ChatAIBadgr(
            api_key=self._api_key,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            streaming=streaming,
            base_url=base_url,
            **kwargs
        )
