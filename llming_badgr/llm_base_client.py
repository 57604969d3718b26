"""Base LLM client implementation."""
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Iterator, List, Optional, Union

from .messages import LlmAIMessage, LlmHumanMessage, LlmSystemMessage, LlmToolMessage, LlmMessageChunk
from .llm_base_models import ModelProfile

LlmMessage = Union[LlmSystemMessage, LlmHumanMessage, LlmAIMessage, LlmToolMessage]

SERIALIZATION_VERSION = 1


class LlmClient(ABC):
    """Base class for LLM clients."""

    provider_id: str = "unknown"
    """Fixed provider identifier reported for logging and tracing."""

    serializable: bool = False
    """Whether `to_json` emits a constructor record for this client."""

    def __init__(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        streaming: bool = False
    ):
        """Initialize LLM client.

        Args:
            model: Model name to use
            temperature: Temperature for responses
            max_tokens: Maximum tokens to generate
            streaming: Whether to enable streaming mode
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.streaming = streaming

    @classmethod
    def serialized_name(cls) -> str:
        """Name under which the client is serialized."""
        return cls.__name__

    @property
    def llm_type(self) -> str:
        return self.provider_id

    @property
    def serialization_namespace(self) -> List[str]:
        """Module path prefix of the serialized constructor id."""
        return self.__class__.__module__.split(".")

    @property
    def secret_fields(self) -> Dict[str, str]:
        """Constructor fields holding secrets, mapped to the environment variable they come from."""
        return {}

    @property
    def profile(self) -> ModelProfile:
        """Token limits and capabilities of the configured model. Empty if unknown."""
        return ModelProfile()

    def get_ls_params(self, **call_options: Any) -> Dict[str, Any]:
        """Tracing parameters describing a call.

        Args:
            **call_options: Options of the call being traced

        Returns:
            Dict with ls_provider, ls_model_name, ls_model_type and the sampling settings in effect
        """
        params: Dict[str, Any] = {
            "ls_provider": self.provider_id,
            "ls_model_name": self.model,
            "ls_model_type": "chat",
            "ls_temperature": call_options.get("temperature", self.temperature),
        }
        max_tokens = call_options.get("max_tokens", self.max_tokens)
        if max_tokens is not None:
            params["ls_max_tokens"] = max_tokens
        stop = call_options.get("stop", getattr(self, "stop", None))
        if stop:
            params["ls_stop"] = stop if isinstance(stop, list) else [stop]
        return params

    def serializable_kwargs(self) -> Dict[str, Any]:
        """Constructor arguments needed to recreate this client."""
        return {
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "streaming": self.streaming,
        }

    def to_json(self) -> Dict[str, Any]:
        """Serialize the client into a loggable constructor record.

        Values of `secret_fields` are replaced by a reference to their environment variable.

        Returns:
            {"version", "type", "id", "kwargs"} record, or a "not_implemented" record
            if the client is not serializable
        """
        class_id = [*self.serialization_namespace, self.serialized_name()]
        if not self.serializable:
            return {"version": SERIALIZATION_VERSION, "type": "not_implemented", "id": class_id}

        kwargs = {key: value for key, value in self.serializable_kwargs().items() if value is not None}
        for field_name, env_name in self.secret_fields.items():
            if field_name in kwargs:
                kwargs[field_name] = {"version": SERIALIZATION_VERSION, "type": "secret", "id": [env_name]}
        return {
            "version": SERIALIZATION_VERSION,
            "type": "constructor",
            "id": class_id,
            "kwargs": kwargs,
        }

    @abstractmethod
    def invoke(self, messages: List[LlmMessage], **kwargs: Any) -> LlmAIMessage:
        """Synchronously invoke the model.

        Args:
            messages: List of messages to send
            **kwargs: Per-call options

        Returns:
            Model response message
        """
        pass

    @abstractmethod
    async def ainvoke(self, messages: List[LlmMessage], **kwargs: Any) -> LlmAIMessage:
        """Asynchronously invoke the model.

        Args:
            messages: List of messages to send
            **kwargs: Per-call options

        Returns:
            Model response message
        """
        pass

    @abstractmethod
    def stream(self, messages: List[LlmMessage], **kwargs: Any) -> Iterator[LlmMessageChunk]:
        """Stream responses from the model synchronously.

        Args:
            messages: List of messages to send
            **kwargs: Per-call options

        Returns:
            Iterator yielding response chunks
        """
        pass

    @abstractmethod
    async def astream(
        self,
        messages: List[LlmMessage],
        usage_callback: Optional[callable] = None,
        **kwargs: Any,
    ) -> AsyncIterator[LlmMessageChunk]:
        """Stream responses from the model asynchronously.

        Args:
            messages: List of messages to send
            usage_callback: Optional callback(input_tokens, output_tokens) called once the stream is exhausted.
            **kwargs: Per-call options

        Returns:
            AsyncIterator yielding response chunks
        """
        pass
