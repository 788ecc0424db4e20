from __future__ import annotations
from enum import Enum
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class GenerateRequest(BaseModel):
    model: str
    ui_library: str = Field(alias="uiLibrary")
    messages: list[ChatMessage]


class ComponentDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    import_docs: str
    usage_docs: str


class UILibrary(str, Enum):
    """Prestyled component set injected into the system prompt."""

    SHADCN = "shadcn"
    # Wire value kept as clients send it.
    ACETERNITY = "acceternity"
    REACTAI = "reactai"
    NONE = "none"

    @classmethod
    def parse(cls, value: str | UILibrary) -> UILibrary:
        """Map a caller-supplied selector to a library; unknown values become NONE."""
        if isinstance(value, UILibrary):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


def validate_request(payload: Any) -> GenerateRequest:
    """Validate a decoded JSON body. Raises pydantic.ValidationError on mismatch."""
    return GenerateRequest.model_validate(payload)
