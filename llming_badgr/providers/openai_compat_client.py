"""
OpenAI-compatible Chat Completions API client.

Used by providers with OpenAI-compatible APIs (AI Badgr and other budget endpoints)
that only implement the Chat Completions API.
"""
from __future__ import annotations

import copy
import itertools
import json
import logging
from typing import (
    Any,
    AsyncIterator,
    Iterator,
    List,
    Optional,
    Dict,
    Sequence,
    Union,
)

from openai import OpenAI, AsyncOpenAI

from llming_badgr.llm_base_client import LlmClient, LlmMessage
from llming_badgr.messages import (
    LlmAIMessage,
    LlmHumanMessage,
    LlmSystemMessage,
    LlmToolCall,
    LlmToolMessage,
    LlmMessageChunk,
)
from llming_badgr.llm_base_models import Role

logger = logging.getLogger(__name__)


def _convert_messages(messages: List[LlmMessage]) -> List[Dict[str, Any]]:
    """Convert internal messages to OpenAI Chat Completions format."""
    role_map = {
        LlmSystemMessage: "system",
        LlmHumanMessage: "user",
        LlmAIMessage: "assistant",
        LlmToolMessage: "tool",
    }
    converted = []
    for m in messages:
        entry: Dict[str, Any] = {"role": role_map[type(m)], "content": m.content}
        if isinstance(m, LlmHumanMessage) and m.name:
            entry["name"] = m.name
        elif isinstance(m, LlmAIMessage) and m.tool_calls:
            entry["tool_calls"] = [
                {
                    "id": call.id,
                    "type": "function",
                    "function": {
                        "name": call.name,
                        "arguments": call.raw_arguments or json.dumps(call.arguments),
                    },
                }
                for call in m.tool_calls
            ]
        elif isinstance(m, LlmToolMessage):
            entry["tool_call_id"] = m.tool_call_id
        converted.append(entry)
    return converted


def _format_tool(tool: Dict[str, Any]) -> Dict[str, Any]:
    """Accept either a full Chat Completions tool or a bare function schema."""
    if tool.get("type") == "function" and "function" in tool:
        return tool
    if "name" in tool:
        return {"type": "function", "function": tool}
    raise ValueError(f"Tool definition needs a 'name' or a 'function' entry: {tool!r}")


def _make_tool_call(call_id: str, name: str, raw_arguments: str) -> LlmToolCall:
    try:
        arguments = json.loads(raw_arguments) if raw_arguments else {}
    except json.JSONDecodeError:
        logger.warning(f"Tool call {call_id} returned non-JSON arguments")
        arguments = {}
    return LlmToolCall(id=call_id, name=name, arguments=arguments, raw_arguments=raw_arguments)


def _parse_tool_calls(raw_calls: Optional[Sequence[Any]]) -> List[LlmToolCall]:
    return [
        _make_tool_call(raw.id, raw.function.name, raw.function.arguments or "")
        for raw in raw_calls or []
    ]


def _merge_tool_call_deltas(pending: Dict[int, Dict[str, str]], deltas: Optional[Sequence[Any]]) -> None:
    """Accumulate streamed tool call fragments by their index.

    The id and name usually arrive with the first fragment, the arguments are split
    across the following ones.
    """
    for position, delta in enumerate(deltas or []):
        index = getattr(delta, "index", None)
        entry = pending.setdefault(position if index is None else index, {"id": "", "name": "", "arguments": ""})
        if delta.id:
            entry["id"] = delta.id
        function = delta.function
        if function is not None:
            if function.name:
                entry["name"] += function.name
            if function.arguments:
                entry["arguments"] += function.arguments


def _finish_tool_calls(pending: Dict[int, Dict[str, str]]) -> List[LlmToolCall]:
    return [
        _make_tool_call(entry["id"], entry["name"], entry["arguments"])
        for _, entry in sorted(pending.items())
    ]


def _parse_response(response: Any) -> LlmAIMessage:
    choice = response.choices[0]
    metadata: Dict[str, Any] = {
        "model": response.model,
        "finish_reason": choice.finish_reason,
    }
    if response.usage:
        metadata["input_tokens"] = response.usage.prompt_tokens
        metadata["output_tokens"] = response.usage.completion_tokens
    return LlmAIMessage(
        content=choice.message.content or "",
        tool_calls=_parse_tool_calls(choice.message.tool_calls),
        response_metadata=metadata,
    )


class OpenAICompatibleClient(LlmClient):
    """Client for OpenAI-compatible APIs.

    Uses the standard Chat Completions API (not Responses API). Every request passes
    through `create_completion` / `acreate_completion`, which subclasses override to
    adapt requests for endpoints with a reduced feature set.
    """

    provider_id = "openai_compatible"

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        streaming: bool = False,
        base_url: Optional[str] = None,
        top_p: Optional[float] = None,
        stop: Optional[Union[str, List[str]]] = None,
        frequency_penalty: Optional[float] = None,
        presence_penalty: Optional[float] = None,
        logit_bias: Optional[Dict[str, int]] = None,
        timeout: Optional[float] = None,
        max_retries: int = 2,
        model_kwargs: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(model, temperature, max_tokens, streaming)
        self.api_key = api_key
        self.base_url = base_url
        self.top_p = top_p
        self.stop = stop
        self.frequency_penalty = frequency_penalty
        self.presence_penalty = presence_penalty
        self.logit_bias = logit_bias
        self.timeout = timeout
        self.max_retries = max_retries
        self.model_kwargs: Dict[str, Any] = dict(model_kwargs or {})

        client_kwargs: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": base_url,  # None → default api.openai.com
            "max_retries": max_retries,
        }
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = OpenAI(**client_kwargs)
        self._aclient = AsyncOpenAI(**client_kwargs)

    def serializable_kwargs(self) -> Dict[str, Any]:
        kwargs = super().serializable_kwargs()
        kwargs.update({
            "api_key": self.api_key,
            "top_p": self.top_p,
            "stop": self.stop,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
            "logit_bias": self.logit_bias,
            "model_kwargs": self.model_kwargs or None,
            "configuration": {
                "base_url": self.base_url,
                "timeout": self.timeout,
                "max_retries": self.max_retries,
            },
        })
        return kwargs

    def bind_tools(
        self,
        tools: Sequence[Dict[str, Any]],
        tool_choice: Optional[Union[str, Dict[str, Any]]] = None,
    ) -> "OpenAICompatibleClient":
        """Return a copy of this client that sends `tools` with every request.

        Args:
            tools: Chat Completions tool definitions or bare function schemas
                   ({"name", "description", "parameters"})
            tool_choice: Optional "auto", "none", "required" or a specific tool selector

        Returns:
            A new client sharing this client's connection settings
        """
        bound = copy.copy(self)
        bound.model_kwargs = {**self.model_kwargs, "tools": [_format_tool(tool) for tool in tools]}
        if tool_choice is not None:
            bound.model_kwargs["tool_choice"] = tool_choice
        return bound

    def _build_kwargs(
        self,
        messages: List[LlmMessage],
        stream: bool = False,
        **call_options: Any,
    ) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": _convert_messages(messages),
            "temperature": self.temperature,
        }
        optional = {
            "max_tokens": self.max_tokens,
            "top_p": self.top_p,
            "stop": self.stop,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
            "logit_bias": self.logit_bias,
        }
        kwargs.update({key: value for key, value in optional.items() if value is not None})
        kwargs.update(self.model_kwargs)
        kwargs.update({key: value for key, value in call_options.items() if value is not None})
        if stream:
            kwargs["stream"] = True
            kwargs["stream_options"] = {"include_usage": True}
        return kwargs

    # ── completion hooks ────────────────────────────────────────────────── #

    def create_completion(self, request: Dict[str, Any]) -> Any:
        """Send a chat completion request through the synchronous SDK client."""
        return self._client.chat.completions.create(**request)

    async def acreate_completion(self, request: Dict[str, Any]) -> Any:
        """Send a chat completion request through the asynchronous SDK client."""
        return await self._aclient.chat.completions.create(**request)

    # ── synchronous invoke ──────────────────────────────────────────────── #

    def invoke(self, messages: List[LlmMessage], **kwargs: Any) -> LlmAIMessage:
        request = self._build_kwargs(messages, **kwargs)
        return _parse_response(self.create_completion(request))

    # ── async invoke ────────────────────────────────────────────────────── #

    async def ainvoke(self, messages: List[LlmMessage], **kwargs: Any) -> LlmAIMessage:
        request = self._build_kwargs(messages, **kwargs)
        return _parse_response(await self.acreate_completion(request))

    # ── synchronous streaming ───────────────────────────────────────────── #

    def stream(self, messages: List[LlmMessage], **kwargs: Any) -> Iterator[LlmMessageChunk]:
        request = self._build_kwargs(messages, stream=True, **kwargs)
        chunk_index = itertools.count()

        total_input_tokens = 0
        total_output_tokens = 0
        pending_tool_calls: Dict[int, Dict[str, str]] = {}

        for chunk in self.create_completion(request):
            if chunk.usage:
                total_input_tokens = chunk.usage.prompt_tokens or 0
                total_output_tokens = chunk.usage.completion_tokens or 0

            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta
            if delta and delta.tool_calls:
                _merge_tool_call_deltas(pending_tool_calls, delta.tool_calls)
            content = delta.content if delta and delta.content else ""
            if content:
                yield LlmMessageChunk(
                    content=content,
                    role=Role.ASSISTANT,
                    index=next(chunk_index),
                    is_final=False,
                    response_metadata={},
                )

        yield LlmMessageChunk(
            content="",
            role=Role.ASSISTANT,
            index=next(chunk_index),
            is_final=True,
            tool_calls=_finish_tool_calls(pending_tool_calls),
            response_metadata={
                "total_input_tokens": total_input_tokens,
                "total_output_tokens": total_output_tokens,
            },
        )

    # ── async streaming ─────────────────────────────────────────────────── #

    async def astream(
        self,
        messages: List[LlmMessage],
        usage_callback: Optional[callable] = None,
        **kwargs: Any,
    ) -> AsyncIterator[LlmMessageChunk]:
        request = self._build_kwargs(messages, stream=True, **kwargs)
        chunk_index = itertools.count()

        total_input_tokens = 0
        total_output_tokens = 0
        pending_tool_calls: Dict[int, Dict[str, str]] = {}

        response_stream = await self.acreate_completion(request)
        async for chunk in response_stream:
            # Capture usage from the final chunk (stream_options.include_usage)
            if chunk.usage:
                total_input_tokens = chunk.usage.prompt_tokens or 0
                total_output_tokens = chunk.usage.completion_tokens or 0

            if not chunk.choices:
                continue
            delta = chunk.choices[0].delta
            if delta and delta.tool_calls:
                _merge_tool_call_deltas(pending_tool_calls, delta.tool_calls)
            content = delta.content if delta and delta.content else ""
            if content:
                yield LlmMessageChunk(
                    content=content,
                    role=Role.ASSISTANT,
                    index=next(chunk_index),
                    is_final=False,
                    response_metadata={},
                )

        if usage_callback and (total_input_tokens or total_output_tokens):
            try:
                usage_callback(total_input_tokens, total_output_tokens)
            except Exception as e:
                logger.warning(f"Usage callback error: {e}")

        yield LlmMessageChunk(
            content="",
            role=Role.ASSISTANT,
            index=next(chunk_index),
            is_final=True,
            tool_calls=_finish_tool_calls(pending_tool_calls),
            response_metadata={
                "total_input_tokens": total_input_tokens,
                "total_output_tokens": total_output_tokens,
            },
        )
