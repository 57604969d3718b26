"""LLM Manager for managing available LLM providers and clients."""
import logging
from typing import Dict, List, Optional, Set

from .llm_base_client import LlmClient
from .providers import (
    LLMInfo,
    get_provider,
    BaseProvider,
    PROVIDERS,
)

logger = logging.getLogger(__name__)


class LLMManager:
    """Manages multiple LLM providers and the clients created from them."""

    # Currently supported providers
    SUPPORTED_PROVIDERS = {
        "aibadgr",
    }

    def __init__(self):
        """Initialize LLM manager with every supported provider that has credentials."""
        self.providers: Dict[str, BaseProvider] = {}
        for provider_name in self.SUPPORTED_PROVIDERS:
            try:
                provider_class = get_provider(provider_name)
                provider = provider_class()
            except (ValueError, KeyError) as e:
                # Skip providers that can't be initialized
                logger.warning(f"Skipping provider {provider_name}: {e}")
                continue
            # Only add provider if it's available (has valid API key)
            if provider.is_available:
                self.providers[provider_name] = provider

    def register_provider(self, provider: BaseProvider) -> None:
        """Register a custom provider instance.

        :param provider: A BaseProvider instance to register
        """
        PROVIDERS[provider.name] = type(provider)
        if provider.is_available:
            self.providers[provider.name] = provider

    def get_available_llms(self) -> List[LLMInfo]:
        """Get list of available LLMs (only for providers with valid API keys)."""
        models = []
        for provider in self.providers.values():
            models.extend(provider.get_models())
        return models

    def get_providers_for_model(self, model: str) -> Set[str]:
        """Get all providers that can serve a given model name.

        :param model: The model name or high-level name to look up. Alternatively, the model name can be specified as "provider:model".
        :return: Set of provider names that can serve this model
        :raises ValueError: If model is not found
        """
        if ":" in model:  # explicit provider name
            provider_name, model_name = model.split(":", 1)
            if provider_name not in self.providers:
                return set()
            if self.providers[provider_name].get_model(model_name) is None:
                return set()
            return {provider_name}
        providers = set()
        for provider_name, provider in self.providers.items():
            if provider.get_model(model) is not None:
                providers.add(provider_name)

        if not providers:
            raise ValueError(f"Model {model} not found")
        return providers

    def get_provider_for_model(self, model: str) -> str:
        """Get a provider for a given model name.

        :param model: The model name to look up, or "provider:model" to look up by provider name
        :return: First available provider name for the specified model

        :raises ValueError: If model is not found
        """
        providers = self.get_providers_for_model(model)
        if not providers:
            raise ValueError(f"Model {model} not found")
        return sorted(providers)[0]

    def get_model_info(self, model: str) -> LLMInfo:
        """Get model info for a specific model.

        :param model: The model to get info for, or "provider:model" to look up by provider name
        :return: LLMInfo for the specified model

        :raises ValueError: If model is not found
        """
        provider_name = self.get_provider_for_model(model)
        if ":" in model:
            model = model.split(":", 1)[1]

        info = self.providers[provider_name].get_model(model)
        if info is not None:
            return info
        raise ValueError(f"Model {model} not found")

    def create_client(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        streaming: bool = False,
        **kwargs
    ) -> LlmClient:
        """Create a client for a model served by one of the available providers.

        :param model: The model name, or "provider:model"
        :param temperature: Temperature for responses
        :param max_tokens: Maximum tokens to generate, defaults to the model's output limit
        :param streaming: Whether to stream responses
        :param kwargs: Additional provider-specific arguments
        :return: Configured LlmClient instance

        :raises ValueError: If model is not found
        """
        provider = self.providers[self.get_provider_for_model(model)]
        info = self.get_model_info(model)
        return provider.create_client(
            model=info.model,
            temperature=temperature,
            max_tokens=max_tokens if max_tokens is not None else info.max_output_tokens,
            streaming=streaming,
            base_url=info.api_base,
            **kwargs
        )
