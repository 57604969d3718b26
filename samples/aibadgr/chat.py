#!/usr/bin/env python3
"""Ask AI Badgr a question, once as a whole reply and once streamed.

    export AIBADGR_API_KEY="your-api-key"
    python samples/aibadgr/chat.py

Environment variables:
    AIBADGR_API_KEY   — API key (required, may also live in a .env file)
    AIBADGR_BASE_URL  — Endpoint override (optional)
    AIBADGR_MODEL     — Tier or model name (default: premium)
"""
import logging
import os

from dotenv import load_dotenv

from llming_badgr import ChatAIBadgr, LlmHumanMessage, LlmSystemMessage


def main():
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    client = ChatAIBadgr(model=os.environ.get("AIBADGR_MODEL"), temperature=0.9)
    profile = client.profile
    if not profile.is_empty:
        print(f"{client.model}: {profile.max_input_tokens} input / {profile.max_output_tokens} output tokens")

    messages = [
        LlmSystemMessage(content="You are a helpful assistant."),
        LlmHumanMessage(content="What would be a good company name for a company that makes colorful socks?"),
    ]
    print(client.invoke(messages).content)

    for chunk in client.stream([LlmHumanMessage(content='Translate "I love programming" into French.')]):
        print(chunk.content, end="", flush=True)
    print()


if __name__ == "__main__":
    main()
