"""Test configuration and fixtures."""
import os
from typing import Any, Dict, List, Optional, Tuple

import pytest
from openai.types.chat import ChatCompletion, ChatCompletionChunk

from llming_badgr.config import AIBADGR_API_KEY_ENV, AIBADGR_BASE_URL_ENV

# Captured before the isolation fixture clears the environment
LIVE_API_KEY = os.environ.get(AIBADGR_API_KEY_ENV)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real credentials out of the unit tests."""
    monkeypatch.delenv(AIBADGR_API_KEY_ENV, raising=False)
    monkeypatch.delenv(AIBADGR_BASE_URL_ENV, raising=False)


def make_completion(
    content: Optional[str] = "J'adore la programmation.",
    tool_calls: Optional[List[Dict[str, Any]]] = None,
    usage: Optional[Tuple[int, int]] = (19, 8),
    model: str = "premium",
) -> ChatCompletion:
    """Build a Chat Completions response as the OpenAI SDK returns it."""
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls:
        message["tool_calls"] = tool_calls
    data: Dict[str, Any] = {
        "id": "chatcmpl-abc123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [{
            "index": 0,
            "finish_reason": "tool_calls" if tool_calls else "stop",
            "message": message,
        }],
    }
    if usage:
        data["usage"] = {"prompt_tokens": usage[0], "completion_tokens": usage[1], "total_tokens": sum(usage)}
    return ChatCompletion.model_validate(data)


def make_chunk(
    content: Optional[str] = None,
    usage: Optional[Tuple[int, int]] = None,
    tool_calls: Optional[List[Dict[str, Any]]] = None,
) -> ChatCompletionChunk:
    """Build a streamed chunk; without content or tool calls it carries no choices (the usage-only final chunk)."""
    data: Dict[str, Any] = {
        "id": "chatcmpl-abc123",
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": "premium",
        "choices": [],
    }
    if content is not None or tool_calls:
        delta: Dict[str, Any] = {"content": content}
        if tool_calls:
            delta["tool_calls"] = tool_calls
        data["choices"] = [{"index": 0, "delta": delta, "finish_reason": None}]
    if usage:
        data["usage"] = {"prompt_tokens": usage[0], "completion_tokens": usage[1], "total_tokens": sum(usage)}
    return ChatCompletionChunk.model_validate(data)


async def async_iter(items):
    for item in items:
        yield item
