"""Conversation message records shared by requests and responses."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class WireModel(BaseModel):
    """Base for records sent to or read from the API.

    Unknown response fields are ignored; the upstream schema moves faster
    than this library.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with unset optional fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FunctionCall(WireModel):
    name: str
    arguments: str  # JSON-encoded


class ToolCall(WireModel):
    id: str
    tool_type: str = Field(default="function", alias="type")
    function: FunctionCall

    @classmethod
    def new(cls, id: str, name: str, arguments: str) -> "ToolCall":
        return cls(id=id, function=FunctionCall(name=name, arguments=arguments))


class FunctionDefinition(WireModel):
    name: str
    description: str
    parameters: dict[str, Any]  # JSON schema


class Tool(WireModel):
    tool_type: str = Field(default="function", alias="type")
    function: FunctionDefinition

    @classmethod
    def function_tool(cls, name: str, description: str, parameters: dict[str, Any]) -> "Tool":
        return cls(
            function=FunctionDefinition(name=name, description=description, parameters=parameters)
        )


class Message(WireModel):
    role: Role
    content: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None  # set on tool-role messages

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)

    @classmethod
    def assistant_with_tool_calls(cls, tool_calls: list[ToolCall]) -> "Message":
        return cls(role=Role.ASSISTANT, tool_calls=tool_calls)

    @classmethod
    def tool(cls, tool_call_id: str, content: str) -> "Message":
        return cls(role=Role.TOOL, content=content, tool_call_id=tool_call_id)
