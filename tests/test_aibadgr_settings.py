"""Tests for AI Badgr credential and endpoint resolution."""
import dataclasses

import pytest

from llming_badgr.config import (
    AIBADGR_BASE_URL,
    AIBADGR_DEFAULT_MODEL,
    AIBadgrConfigError,
    AIBadgrSettings,
)

MISSING_KEY_MESSAGE = (
    'AI Badgr API key not found. Please set the AIBADGR_API_KEY environment variable '
    'or pass the key into the "api_key" field.'
)


def test_explicit_key():
    settings = AIBadgrSettings.resolve(api_key="explicit", environ={})
    assert settings.api_key == "explicit"


def test_alias_key():
    settings = AIBadgrSettings.resolve(aibadgr_api_key="alias", environ={})
    assert settings.api_key == "alias"


def test_environment_key():
    settings = AIBadgrSettings.resolve(environ={"AIBADGR_API_KEY": "from-env"})
    assert settings.api_key == "from-env"


def test_explicit_key_wins_over_alias_and_environment():
    settings = AIBadgrSettings.resolve(
        api_key="explicit", aibadgr_api_key="alias", environ={"AIBADGR_API_KEY": "from-env"}
    )
    assert settings.api_key == "explicit"


def test_alias_wins_over_environment():
    settings = AIBadgrSettings.resolve(aibadgr_api_key="alias", environ={"AIBADGR_API_KEY": "from-env"})
    assert settings.api_key == "alias"


def test_empty_values_are_skipped():
    settings = AIBadgrSettings.resolve(api_key="", aibadgr_api_key="", environ={"AIBADGR_API_KEY": "from-env"})
    assert settings.api_key == "from-env"


def test_missing_key_raises():
    with pytest.raises(AIBadgrConfigError) as exc_info:
        AIBadgrSettings.resolve(environ={})
    assert str(exc_info.value) == MISSING_KEY_MESSAGE


def test_missing_key_is_a_value_error():
    with pytest.raises(ValueError):
        AIBadgrSettings.resolve(environ={"AIBADGR_API_KEY": ""})


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("AIBADGR_API_KEY", "process-env")
    assert AIBadgrSettings.resolve().api_key == "process-env"


def test_default_base_url_and_model():
    settings = AIBadgrSettings.resolve(api_key="k", environ={})
    assert settings.base_url == AIBADGR_BASE_URL == "https://aibadgr.com/api/v1"
    assert settings.model == AIBADGR_DEFAULT_MODEL == "premium"


def test_base_url_override_from_environment():
    settings = AIBadgrSettings.resolve(api_key="k", environ={"AIBADGR_BASE_URL": "http://localhost:8080/v1"})
    assert settings.base_url == "http://localhost:8080/v1"


def test_explicit_base_url_wins_over_environment():
    settings = AIBadgrSettings.resolve(
        api_key="k", base_url="http://proxy/v1", environ={"AIBADGR_BASE_URL": "http://localhost:8080/v1"}
    )
    assert settings.base_url == "http://proxy/v1"


def test_settings_are_immutable():
    settings = AIBadgrSettings.resolve(api_key="k", environ={})
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.api_key = "other"


def test_repr_hides_key():
    settings = AIBadgrSettings.resolve(api_key="super-secret", environ={})
    assert "super-secret" not in repr(settings)
