"""Tests for the AI Badgr model profile table."""
import pytest
from pydantic import ValidationError

from llming_badgr.llm_base_models import ModelProfile
from llming_badgr.providers.llm_provider_models import ModelSize
from llming_badgr.providers.aibadgr.aibadgr_models import (
    AIBADGR_MODELS,
    AIBADGR_PROFILES,
    BASIC_MODEL,
    get_profile,
)


@pytest.mark.parametrize("tier,alias,max_input,max_output", [
    ("basic", "phi-3-mini", 8192, 4096),
    ("normal", "mistral-7b", 16384, 8192),
    ("premium", "llama3-8b-instruct", 32768, 16384),
])
def test_tiers_and_aliases(tier, alias, max_input, max_output):
    assert get_profile(tier).max_input_tokens == max_input
    assert get_profile(tier).max_output_tokens == max_output
    assert get_profile(alias) == get_profile(tier)


def test_aliases_share_the_tier_record():
    assert AIBADGR_PROFILES["phi-3-mini"] is AIBADGR_PROFILES["basic"]


def test_capability_flags():
    profile = get_profile("premium")
    assert profile.tool_calling is True
    assert profile.structured_output is False
    assert profile.reasoning_output is False
    for flag in ("image_inputs", "audio_inputs", "pdf_inputs", "video_inputs",
                 "image_outputs", "audio_outputs", "video_outputs"):
        assert getattr(profile, flag) is False


def test_unknown_model_yields_empty_profile():
    profile = get_profile("totally-unknown-model")
    assert profile == ModelProfile()
    assert profile.is_empty
    assert profile.model_dump(exclude_none=True) == {}


@pytest.mark.parametrize("name", ["Premium", "premium ", "llama3", "gpt-4"])
def test_lookup_is_exact(name):
    assert get_profile(name).is_empty


def test_table_is_read_only():
    with pytest.raises(TypeError):
        AIBADGR_PROFILES["gpt-4"] = ModelProfile(max_input_tokens=1)


def test_profiles_are_frozen():
    with pytest.raises(ValidationError):
        get_profile("basic").max_input_tokens = 1
    assert get_profile("basic").max_input_tokens == 8192


def test_models_cover_every_profile():
    assert {info.name for info in AIBADGR_MODELS} == set(AIBADGR_PROFILES)
    for info in AIBADGR_MODELS:
        profile = get_profile(info.model)
        assert info.provider == "aibadgr"
        assert info.max_input_tokens == profile.max_input_tokens
        assert info.max_output_tokens == profile.max_output_tokens
        assert info.supports_tools


def test_power_user_models_report_their_tier():
    tiers = {info.name: info.tier for info in AIBADGR_MODELS}
    assert tiers["phi-3-mini"] == "basic"
    assert tiers["mistral-7b"] == "normal"
    assert tiers["llama3-8b-instruct"] == "premium"


def test_basic_model():
    assert BASIC_MODEL.name == "basic"
    assert BASIC_MODEL.size == ModelSize.SMALL
