"""Common models for LLM providers."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from llming_badgr.llm_base_models import ModelProfile


class ModelSize(IntEnum):
    """Size categories for LLM models."""
    VERY_SMALL = 1
    SMALL = 2
    MEDIUM = 3
    LARGE = 4
    VERY_LARGE = 5


@dataclass
class LLMInfo:
    """Information about an LLM model."""
    provider: str  # Provider name
    name: str  # High-level name for identification
    label: str  # Human-readable label
    model: str  # Actual model name for the API
    description: str
    size: ModelSize = ModelSize.MEDIUM  # Model size category
    max_input_tokens: int = 64000  # Maximum number of input tokens
    max_output_tokens: int = 4096  # Maximum number of output tokens
    api_base: Optional[str] = None  # Base URL for the API, None to use default
    supports_system_prompt: bool = True  # Whether the model supports system prompts
    supports_image_input: bool = False  # Whether the model supports image inputs
    supports_tools: bool = False  # Whether the model supports tool calling
    tier: Optional[str] = None  # Pricing tier the model is served under, if any
    popularity: int = 0  # Higher value = more popular
    highlights: List[str] = field(default_factory=list)  # Key capabilities shown in detail view

    @classmethod
    def from_profile(cls, provider: str, name: str, label: str, description: str, profile: ModelProfile,
                     **kwargs) -> "LLMInfo":
        """Build a catalogue entry whose limits and capabilities come from a model profile."""
        return cls(
            provider=provider,
            name=name,
            label=label,
            model=name,
            description=description,
            max_input_tokens=profile.max_input_tokens,
            max_output_tokens=profile.max_output_tokens,
            supports_image_input=bool(profile.image_inputs),
            supports_tools=bool(profile.tool_calling),
            **kwargs,
        )
