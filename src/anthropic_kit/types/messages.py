# src/anthropic_kit/types/messages.py

"""Request parameters and response entities for the Messages API."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from anthropic_kit.params import RequestParams

from .common import ApiModel


class Role(str, Enum):
    """Message role in a conversation."""

    USER = "user"
    ASSISTANT = "assistant"


# ============================================================================
# Request content blocks
# ============================================================================


@dataclass(frozen=True)
class TextBlockParam:
    text: str
    type: str = field(default="text", init=False)


@dataclass(frozen=True)
class ImageBlockParam:
    source: dict[str, Any]
    type: str = field(default="image", init=False)

    @classmethod
    def from_base64(cls, media_type: str, data: str) -> "ImageBlockParam":
        return cls(source={"type": "base64", "media_type": media_type, "data": data})

    @classmethod
    def from_url(cls, url: str) -> "ImageBlockParam":
        return cls(source={"type": "url", "url": url})


@dataclass(frozen=True)
class DocumentBlockParam:
    source: dict[str, Any]
    title: str | None = None
    type: str = field(default="document", init=False)

    @classmethod
    def from_file(cls, file_id: str, title: str | None = None) -> "DocumentBlockParam":
        """Reference a document previously uploaded through the Files API."""
        return cls(source={"type": "file", "file_id": file_id}, title=title)


@dataclass(frozen=True)
class ToolUseBlockParam:
    id: str
    name: str
    input: dict[str, Any]
    type: str = field(default="tool_use", init=False)


@dataclass(frozen=True)
class ToolResultBlockParam:
    tool_use_id: str
    content: str | list[Any]
    is_error: bool | None = None
    type: str = field(default="tool_result", init=False)


ContentBlockParam = Union[
    TextBlockParam,
    ImageBlockParam,
    DocumentBlockParam,
    ToolUseBlockParam,
    ToolResultBlockParam,
    dict[str, Any],
]


@dataclass(frozen=True)
class MessageParam:
    """A single input message. Content is plain text or a list of blocks."""

    role: Role
    content: str | list[ContentBlockParam]

    @classmethod
    def user(cls, content: str | list[ContentBlockParam]) -> "MessageParam":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str | list[ContentBlockParam]) -> "MessageParam":
        return cls(role=Role.ASSISTANT, content=content)


# ============================================================================
# Tools, thinking, metadata
# ============================================================================


@dataclass(frozen=True)
class ToolParam:
    name: str
    input_schema: dict[str, Any]
    description: str | None = None

    @classmethod
    def from_model(
        cls, name: str, description: str, input_model: type[BaseModel]
    ) -> "ToolParam":
        """Build a tool definition whose input schema is a pydantic model's JSON schema."""
        return cls(
            name=name,
            description=description,
            input_schema=input_model.model_json_schema(),
        )


@dataclass(frozen=True)
class ToolChoice:
    type: Literal["auto", "any", "tool", "none"] = "auto"
    name: str | None = None  # Required when type="tool"
    disable_parallel_tool_use: bool | None = None

    @classmethod
    def tool(cls, name: str) -> "ToolChoice":
        return cls(type="tool", name=name)


@dataclass(frozen=True)
class ThinkingConfig:
    budget_tokens: int
    type: str = field(default="enabled", init=False)


@dataclass(frozen=True)
class Metadata:
    user_id: str | None = None


# ============================================================================
# Request parameters
# ============================================================================


@dataclass
class CreateMessageParams(RequestParams):
    """Parameters for ``POST /messages``.

    Example:
        >>> params = (
        ...     CreateMessageParams(
        ...         model="claude-sonnet-4-20250514",
        ...         messages=[MessageParam.user("Hello!")],
        ...         max_tokens=1024,
        ...     )
        ...     .with_system("You are terse.")
        ...     .with_temperature(0.2)
        ... )
    """

    model: str
    messages: list[MessageParam]
    max_tokens: int
    system: str | list[TextBlockParam] | None = None
    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None
    stop_sequences: list[str] | None = None
    stream: bool | None = None
    metadata: Metadata | None = None
    tools: list[ToolParam] | None = None
    tool_choice: ToolChoice | None = None
    thinking: ThinkingConfig | None = None

    _required = ("model", "messages", "max_tokens")

    def with_system(self, system: str | list[TextBlockParam]) -> "CreateMessageParams":
        self.system = system
        return self

    def with_temperature(self, temperature: float) -> "CreateMessageParams":
        self.temperature = temperature
        return self

    def with_top_p(self, top_p: float) -> "CreateMessageParams":
        self.top_p = top_p
        return self

    def with_top_k(self, top_k: int) -> "CreateMessageParams":
        self.top_k = top_k
        return self

    def with_stop_sequences(self, stop_sequences: list[str]) -> "CreateMessageParams":
        self.stop_sequences = list(stop_sequences)
        return self

    def with_stream(self, stream: bool = True) -> "CreateMessageParams":
        self.stream = stream
        return self

    def with_metadata(self, metadata: Metadata) -> "CreateMessageParams":
        self.metadata = metadata
        return self

    def with_tools(self, tools: list[ToolParam]) -> "CreateMessageParams":
        self.tools = list(tools)
        return self

    def with_tool_choice(self, tool_choice: ToolChoice) -> "CreateMessageParams":
        self.tool_choice = tool_choice
        return self

    def with_thinking(self, budget_tokens: int) -> "CreateMessageParams":
        self.thinking = ThinkingConfig(budget_tokens=budget_tokens)
        return self


@dataclass
class CountMessageTokensParams(RequestParams):
    """Parameters for ``POST /messages/count_tokens``."""

    model: str
    messages: list[MessageParam]
    system: str | list[TextBlockParam] | None = None
    tools: list[ToolParam] | None = None
    tool_choice: ToolChoice | None = None
    thinking: ThinkingConfig | None = None

    _required = ("model", "messages")

    def with_system(
        self, system: str | list[TextBlockParam]
    ) -> "CountMessageTokensParams":
        self.system = system
        return self

    def with_tools(self, tools: list[ToolParam]) -> "CountMessageTokensParams":
        self.tools = list(tools)
        return self

    def with_tool_choice(self, tool_choice: ToolChoice) -> "CountMessageTokensParams":
        self.tool_choice = tool_choice
        return self

    def with_thinking(self, budget_tokens: int) -> "CountMessageTokensParams":
        self.thinking = ThinkingConfig(budget_tokens=budget_tokens)
        return self


# ============================================================================
# Response content blocks
# ============================================================================


class TextBlock(ApiModel):
    type: Literal["text"] = "text"
    text: str
    citations: list[dict[str, Any]] | None = None


class ToolUseBlock(ApiModel):
    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any]


class ThinkingBlock(ApiModel):
    type: Literal["thinking"] = "thinking"
    thinking: str
    signature: str | None = None


class RedactedThinkingBlock(ApiModel):
    type: Literal["redacted_thinking"] = "redacted_thinking"
    data: str


class UnknownBlock(ApiModel):
    """A block type this version does not model. Raw fields are kept."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str


KnownBlock = Annotated[
    Union[TextBlock, ToolUseBlock, ThinkingBlock, RedactedThinkingBlock],
    Field(discriminator="type"),
]

ContentBlock = Annotated[
    Union[KnownBlock, UnknownBlock],
    Field(union_mode="left_to_right"),
]


# ============================================================================
# Responses
# ============================================================================


class Usage(ApiModel):
    input_tokens: int
    output_tokens: int
    cache_creation_input_tokens: int | None = None
    cache_read_input_tokens: int | None = None


class Message(ApiModel):
    """Response of ``POST /messages``."""

    id: str
    type: str = "message"
    role: str = "assistant"
    model: str
    content: list[ContentBlock]
    stop_reason: str | None = None
    stop_sequence: str | None = None
    usage: Usage

    @property
    def text(self) -> str:
        """Concatenated text of all text blocks."""
        return "".join(b.text for b in self.content if isinstance(b, TextBlock))

    @property
    def tool_uses(self) -> list[ToolUseBlock]:
        return [b for b in self.content if isinstance(b, ToolUseBlock)]


class MessageTokensCount(ApiModel):
    """Response of ``POST /messages/count_tokens``."""

    input_tokens: int
