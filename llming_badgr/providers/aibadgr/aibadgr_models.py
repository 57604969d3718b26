"""AI Badgr model configurations."""
from types import MappingProxyType
from typing import Mapping

from llming_badgr.llm_base_models import ModelProfile
from ..llm_provider_models import LLMInfo, ModelSize


# Capabilities shared by every tier
_BASE_CAPABILITIES = dict(
    image_inputs=False,
    audio_inputs=False,
    pdf_inputs=False,
    video_inputs=False,
    reasoning_output=False,
    image_outputs=False,
    audio_outputs=False,
    video_outputs=False,
    tool_calling=True,
    structured_output=False,
)


def _tier_profile(max_input_tokens: int, max_output_tokens: int) -> ModelProfile:
    return ModelProfile(
        max_input_tokens=max_input_tokens,
        max_output_tokens=max_output_tokens,
        **_BASE_CAPABILITIES,
    )


BASIC_PROFILE = _tier_profile(8192, 4096)
NORMAL_PROFILE = _tier_profile(16384, 8192)
PREMIUM_PROFILE = _tier_profile(32768, 16384)

# Power-user model names served under a tier
POWER_USER_TIERS = {
    "phi-3-mini": "basic",
    "mistral-7b": "normal",
    "llama3-8b-instruct": "premium",
}

_TIER_PROFILES = {
    "basic": BASIC_PROFILE,
    "normal": NORMAL_PROFILE,
    "premium": PREMIUM_PROFILE,
}

AIBADGR_PROFILES: Mapping[str, ModelProfile] = MappingProxyType({
    **_TIER_PROFILES,
    **{name: _TIER_PROFILES[tier] for name, tier in POWER_USER_TIERS.items()},
})

_EMPTY_PROFILE = ModelProfile()


def get_profile(model_name: str) -> ModelProfile:
    """Look up the profile of a model by its exact name.

    :param model_name: Tier name ("basic", "normal", "premium") or power-user model name
    :return: The model's profile, or an empty profile for names AI Badgr does not document
    """
    return AIBADGR_PROFILES.get(model_name, _EMPTY_PROFILE)


_TIER_INFO = {
    "basic": ("AI Badgr Basic", "Cheapest tier for short, simple prompts.", ModelSize.SMALL, 10),
    "normal": ("AI Badgr Normal", "Balanced tier for everyday chat and tool calling.", ModelSize.MEDIUM, 20),
    "premium": ("AI Badgr Premium", "Largest context window of the AI Badgr tiers.", ModelSize.LARGE, 30),
}

_POWER_USER_LABELS = {
    "phi-3-mini": "Phi-3 Mini",
    "mistral-7b": "Mistral 7B",
    "llama3-8b-instruct": "Llama 3 8B Instruct",
}


def _build_models() -> list[LLMInfo]:
    models = []
    for tier, (label, description, size, popularity) in _TIER_INFO.items():
        models.append(LLMInfo.from_profile(
            provider="aibadgr",
            name=tier,
            label=label,
            description=description,
            profile=AIBADGR_PROFILES[tier],
            size=size,
            tier=tier,
            popularity=popularity,
            highlights=["Low cost", "Tools"],
        ))
    for name, tier in POWER_USER_TIERS.items():
        _, _, size, popularity = _TIER_INFO[tier]
        models.append(LLMInfo.from_profile(
            provider="aibadgr",
            name=name,
            label=_POWER_USER_LABELS[name],
            description=f"Open-weight model served under the {tier} tier.",
            profile=AIBADGR_PROFILES[name],
            size=size,
            tier=tier,
            popularity=popularity - 5,
            highlights=["Open weights", "Tools"],
        ))
    return models


AIBADGR_MODELS = _build_models()

# Basic model for quick tests (smallest available)
BASIC_MODEL = next(model for model in AIBADGR_MODELS if model.size == ModelSize.SMALL)
