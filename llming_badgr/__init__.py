"""llming-badgr — AI Badgr chat model integration."""

from llming_badgr.llm_base_models import ModelProfile, Role
from llming_badgr.messages import (
    LlmAIMessage, LlmHumanMessage, LlmMessageChunk, LlmSystemMessage, LlmToolCall, LlmToolMessage,
)
from llming_badgr.config import AIBadgrConfigError, AIBadgrSettings
from llming_badgr.llm_provider_manager import LLMManager
from llming_badgr.providers.llm_provider_models import LLMInfo, ModelSize
from llming_badgr.providers.aibadgr import ChatAIBadgr, get_profile, sanitize_request

__all__ = [
    "ChatAIBadgr",
    "AIBadgrConfigError",
    "AIBadgrSettings",
    "LLMManager",
    "LLMInfo",
    "ModelSize",
    "ModelProfile",
    "Role",
    "LlmAIMessage",
    "LlmHumanMessage",
    "LlmMessageChunk",
    "LlmSystemMessage",
    "LlmToolCall",
    "LlmToolMessage",
    "get_profile",
    "sanitize_request",
]
