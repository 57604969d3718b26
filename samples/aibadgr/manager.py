#!/usr/bin/env python3
"""List the AI Badgr models known to the manager and run a tool call on the basic tier.

    export AIBADGR_API_KEY="your-api-key"
    python samples/aibadgr/manager.py
"""
from dotenv import load_dotenv

from llming_badgr import LLMManager, LlmHumanMessage

GET_WEATHER = {
    "name": "get_weather",
    "description": "Get the current weather in a given location",
    "parameters": {
        "type": "object",
        "properties": {
            "location": {"type": "string", "description": "The city and state, e.g. San Francisco, CA"},
        },
        "required": ["location"],
    },
}


def main():
    load_dotenv()
    manager = LLMManager()
    for info in manager.get_available_llms():
        print(f"{info.provider}:{info.name:<20} {info.label:<22} {info.max_input_tokens:>6} tokens")

    client = manager.create_client("aibadgr:basic", temperature=0).bind_tools([GET_WEATHER])
    reply = client.invoke([LlmHumanMessage(content="Which city is hotter today, LA or NY?")])
    for call in reply.tool_calls:
        print(f"{call.name}({call.arguments})")


if __name__ == "__main__":
    main()
