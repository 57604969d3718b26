"""Base provider interface for LLM providers."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .llm_provider_models import LLMInfo
from ..llm_base_client import LlmClient


class BaseProvider(ABC):
    """Base class for LLM providers.

    A provider knows its credentials, the models it serves and how to build a client
    for one of them.
    """

    def __init__(self, name: str, label: str):
        """Initialize provider.

        :param name: The provider name used in the registry and in "provider:model" names, e.g. "aibadgr"
        :param label: The human-readable provider label, e.g. "AI Badgr"
        """
        self.name = name
        self.label = label

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, available={self.is_available})"

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if provider is available (has valid API key)."""
        pass

    @abstractmethod
    def get_models(self) -> List[LLMInfo]:
        """Get list of available models for this provider."""
        pass

    def get_model(self, model: str) -> Optional[LLMInfo]:
        """Find a model by its high-level name or its API model name.

        :param model: Name to look up
        :return: The matching LLMInfo or None
        """
        return next((info for info in self.get_models() if model in (info.name, info.model)), None)

    @abstractmethod
    def create_client(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        streaming: bool = False,
        base_url: Optional[str] = None,
        **kwargs
    ) -> LlmClient:
        """Create an LLM client for one of this provider's models.

        Args:
            model: API model name to use
            temperature: Temperature for responses
            max_tokens: Maximum tokens to generate
            streaming: Whether to stream responses
            base_url: Optional override of the provider's endpoint
            **kwargs: Additional provider-specific arguments

        Returns:
            Configured LlmClient instance
        """
        pass
