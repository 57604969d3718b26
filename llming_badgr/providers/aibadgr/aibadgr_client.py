"""
AI Badgr chat client.

AI Badgr is a budget inference service implementing the OpenAI Chat Completions API
with some limitations: penalty controls, logit bias and the legacy ``functions``
field are rejected. `ChatAIBadgr` removes them from every request and otherwise
behaves exactly like `OpenAICompatibleClient`.

    client = ChatAIBadgr(model="premium", temperature=0)   # key from AIBADGR_API_KEY
    reply = client.invoke([LlmHumanMessage(content="Hello there!")])
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from llming_badgr.config import AIBADGR_API_KEY_ENV, AIBadgrSettings
from llming_badgr.llm_base_models import ModelProfile
from llming_badgr.providers.openai_compat_client import OpenAICompatibleClient
from .aibadgr_models import get_profile

logger = logging.getLogger(__name__)

UNSUPPORTED_REQUEST_FIELDS = ("frequency_penalty", "presence_penalty", "logit_bias", "functions")
"""Chat Completions request fields the AI Badgr API does not accept."""


def sanitize_request(request: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of `request` without the fields AI Badgr does not support.

    The modern ``tools``/``tool_choice`` fields and everything else pass through unchanged.
    """
    dropped = [key for key in UNSUPPORTED_REQUEST_FIELDS if key in request]
    if dropped:
        logger.debug(f"Dropping unsupported AI Badgr request fields: {', '.join(dropped)}")
    return {key: value for key, value in request.items() if key not in UNSUPPORTED_REQUEST_FIELDS}


class ChatAIBadgr(OpenAICompatibleClient):
    """AI Badgr chat model.

    The API key is taken from `api_key`, the legacy `aibadgr_api_key` argument or the
    AIBADGR_API_KEY environment variable, in that order. Requests go to
    https://aibadgr.com/api/v1 unless `base_url` or AIBADGR_BASE_URL say otherwise.
    """

    provider_id = "aibadgr"
    serializable = True

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        aibadgr_api_key: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        streaming: bool = False,
        base_url: Optional[str] = None,
        top_p: Optional[float] = None,
        stop: Optional[Union[str, List[str]]] = None,
        timeout: Optional[float] = None,
        max_retries: int = 2,
        model_kwargs: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the client.

        Args:
            model: Tier ("basic", "normal", "premium"), power-user model name or
                   provider-native name. Defaults to "premium".
            api_key: AI Badgr API key
            aibadgr_api_key: Legacy name of `api_key`
            temperature: Temperature for responses
            max_tokens: Maximum tokens to generate
            streaming: Whether to stream responses
            base_url: Override of the AI Badgr endpoint
            top_p: Nucleus sampling threshold
            stop: Stop sequence(s)
            timeout: Request timeout in seconds, passed to the OpenAI SDK
            max_retries: Retry count, passed to the OpenAI SDK
            model_kwargs: Additional request fields sent with every call

        Raises:
            AIBadgrConfigError: If no API key can be resolved
        """
        self.settings = AIBadgrSettings.resolve(
            api_key=api_key,
            aibadgr_api_key=aibadgr_api_key,
            model=model,
            base_url=base_url,
        )
        self.aibadgr_api_key = aibadgr_api_key
        super().__init__(
            api_key=self.settings.api_key,
            model=self.settings.model,
            temperature=temperature,
            max_tokens=max_tokens,
            streaming=streaming,
            base_url=self.settings.base_url,
            top_p=top_p,
            stop=stop,
            timeout=timeout,
            max_retries=max_retries,
            model_kwargs=model_kwargs,
        )
        logger.info(f"AI Badgr client created for model {self.model} at {self.base_url}")

    @classmethod
    def serialized_name(cls) -> str:
        return "ChatAIBadgr"

    @property
    def serialization_namespace(self) -> List[str]:
        return ["llming_badgr", "chat_models", "aibadgr"]

    @property
    def secret_fields(self) -> Dict[str, str]:
        return {
            "api_key": AIBADGR_API_KEY_ENV,
            "aibadgr_api_key": AIBADGR_API_KEY_ENV,
        }

    @property
    def profile(self) -> ModelProfile:
        return get_profile(self.model)

    def serializable_kwargs(self) -> Dict[str, Any]:
        kwargs = super().serializable_kwargs()
        kwargs["aibadgr_api_key"] = self.aibadgr_api_key
        return kwargs

    def to_json(self) -> Dict[str, Any]:
        """Serialize without the resolved API key and without the endpoint configuration."""
        result = super().to_json()
        kwargs = result.get("kwargs")
        if isinstance(kwargs, dict):
            kwargs.pop("api_key", None)
            kwargs.pop("configuration", None)
        return result

    def create_completion(self, request: Dict[str, Any]) -> Any:
        return super().create_completion(sanitize_request(request))

    async def acreate_completion(self, request: Dict[str, Any]) -> Any:
        return await super().acreate_completion(sanitize_request(request))
