# The module is to define the common models for the application.
# Date: 2025-09-02
# Version: 1.0.0

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Literal


class TextContent(BaseModel):
    """
    A single text payload inside a tool result.
    Attributes:
        type (str): The content type tag, always 'text'.
        text (str): The text payload.
    """
    type: Literal["text"] = "text"
    text: str = Field(..., description="The text payload.")


class ToolResult(BaseModel):
    """
    The envelope every tool call returns. A tool produces exactly one content
    block: the serialized result on success, or an error message with
    is_error set.
    Attributes:
        content (List[TextContent]): The content blocks of the result.
        is_error (Optional[bool]): Set to True when the call failed. Serialized as 'isError'.
    """
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent] = Field(..., description="The content blocks of the result.")
    is_error: Optional[bool] = Field(default=None, alias="isError", description="Whether the tool call failed.")

    @classmethod
    def text(cls, text: str, is_error: Optional[bool] = None) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=is_error)
