"""Provider management for LLM integrations."""
import logging
from typing import Dict, List, Type

# First, import the base types
from .llm_provider_base import BaseProvider
from .llm_provider_models import LLMInfo

logger = logging.getLogger(__name__)

# Registry of provider implementations
PROVIDERS: Dict[str, Type[BaseProvider]] = {}


def register_provider(provider_name: str):
    """Decorator to register provider implementations under `provider_name`."""
    def decorator(provider_class: Type[BaseProvider]):
        previous = PROVIDERS.get(provider_name)
        if previous is not None and previous is not provider_class:
            logger.warning(f"Provider {provider_name} re-registered: {previous.__name__} -> {provider_class.__name__}")
        PROVIDERS[provider_name] = provider_class
        return provider_class
    return decorator


def registered_providers() -> List[str]:
    """Names of all registered providers, sorted."""
    return sorted(PROVIDERS)


def get_provider(provider: str) -> Type[BaseProvider]:
    """Get provider implementation class.

    Args:
        provider: Provider name

    Returns:
        Provider implementation class

    Raises:
        ValueError: If provider is not registered
    """
    if provider not in PROVIDERS:
        raise ValueError(f"Provider {provider} not registered (available: {', '.join(registered_providers())})")
    return PROVIDERS[provider]


# Import all provider implementations to register them
# Note: These imports must come after the register_provider function is defined
from .aibadgr.aibadgr_provider import AIBadgrProvider  # noqa: E402


__all__ = [
    'BaseProvider',
    'LLMInfo',
    'PROVIDERS',
    'register_provider',
    'registered_providers',
    'get_provider',
    'AIBadgrProvider',
]
