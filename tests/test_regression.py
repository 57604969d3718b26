"""Live regression tests against the AI Badgr API."""
import time

import pytest

from llming_badgr.messages import LlmHumanMessage, LlmSystemMessage
from llming_badgr.providers.aibadgr.aibadgr_client import ChatAIBadgr
from llming_badgr.providers.aibadgr.aibadgr_models import BASIC_MODEL
from .conftest import LIVE_API_KEY


@pytest.fixture
def live_client():
    if not LIVE_API_KEY:
        pytest.skip("AIBADGR_API_KEY environment variable not set, skipping AI Badgr integration tests.")
    return ChatAIBadgr(api_key=LIVE_API_KEY, model=BASIC_MODEL.model, max_tokens=16, temperature=0.0)


@pytest.fixture
def ping_messages():
    return [
        LlmSystemMessage(content="You are a test assistant. Always provide extremely concise, one-word responses."),
        LlmHumanMessage(content="Reply with 'pong'"),
    ]


@pytest.mark.regression
def test_invoke_sync(live_client, ping_messages):
    start_time = time.time()
    result = live_client.invoke(ping_messages, frequency_penalty=0.5)
    print(f"\nSync latency: {time.time() - start_time:.2f} seconds")
    assert result.content


@pytest.mark.regression
@pytest.mark.asyncio
async def test_astream(live_client, ping_messages):
    full_response = ""
    async for chunk in live_client.astream(ping_messages):
        full_response += chunk.content
    assert len(full_response) > 0
