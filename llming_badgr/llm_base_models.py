"""Models for chat handling."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """Role in a chat conversation."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ModelProfile(BaseModel):
    """Token limits and capabilities of a model.

    Every field is optional. A profile without any field set stands for an unknown model
    and dumps to an empty dict with ``model_dump(exclude_none=True)``.
    """
    model_config = ConfigDict(frozen=True)

    max_input_tokens: Optional[int] = None
    max_output_tokens: Optional[int] = None
    image_inputs: Optional[bool] = None
    audio_inputs: Optional[bool] = None
    pdf_inputs: Optional[bool] = None
    video_inputs: Optional[bool] = None
    reasoning_output: Optional[bool] = None
    image_outputs: Optional[bool] = None
    audio_outputs: Optional[bool] = None
    video_outputs: Optional[bool] = None
    tool_calling: Optional[bool] = None
    structured_output: Optional[bool] = None

    @property
    def is_empty(self) -> bool:
        """True if no field is set."""
        return not self.model_dump(exclude_none=True)
