"""Message types exchanged with LLM clients."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from llming_badgr.llm_base_models import Role


class LlmSystemMessage(BaseModel):
    """System prompt."""
    content: str


class LlmHumanMessage(BaseModel):
    """Message written by the user."""
    content: str
    name: Optional[str] = None


class LlmToolCall(BaseModel):
    """A tool call requested by the model."""
    id: str
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)
    raw_arguments: str = Field("", description="Arguments as returned by the API, before JSON decoding")


class LlmAIMessage(BaseModel):
    """Message produced by the model."""
    content: str
    tool_calls: List[LlmToolCall] = Field(default_factory=list)
    response_metadata: Dict[str, Any] = Field(default_factory=dict)


class LlmToolMessage(BaseModel):
    """Result of a tool call, sent back to the model."""
    content: str
    tool_call_id: str


class LlmMessageChunk(BaseModel):
    """A single streamed piece of a model response."""
    content: str
    role: Role = Role.ASSISTANT
    index: int = 0
    is_final: bool = False
    tool_calls: List[LlmToolCall] = Field(default_factory=list)
    response_metadata: Dict[str, Any] = Field(default_factory=dict)
