"""Request-side data models.

InvocationParameters is built once from the command line and never mutated.
RequestPayload is the provider-neutral shape of the outbound message; the
Gemini client converts it into SDK types at the boundary.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from imagegen.brand import ContentType


class AspectRatio(str, Enum):
    SQUARE = "1:1"
    WIDE = "16:9"
    TALL = "9:16"
    LANDSCAPE = "4:3"
    PORTRAIT = "3:4"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class InvocationParameters(BaseModel):
    """Everything the user asked for, after flag parsing."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    content_type: ContentType | None = None
    ref_path: Path | None = None
    size: str | None = None  # None → content-type default, then global default
    model: str
    out_dir: Path
    include_brand: bool = True


class InlineImage(BaseModel):
    """Binary payload with its MIME type (raw bytes, not base64)."""

    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: bytes


class RequestPart(BaseModel):
    """Exactly one of inline_data or text is set."""

    model_config = ConfigDict(frozen=True)

    inline_data: InlineImage | None = None
    text: str | None = None

    @model_validator(mode="after")
    def _one_of(self) -> "RequestPart":
        if (self.inline_data is None) == (self.text is None):
            raise ValueError("RequestPart needs exactly one of inline_data or text")
        return self


class RequestPayload(BaseModel):
    """One user-role message: ordered parts plus the resolved aspect ratio."""

    model_config = ConfigDict(frozen=True)

    role: str = "user"
    parts: list[RequestPart] = Field(default_factory=list)
    aspect_ratio: AspectRatio
    composed_prompt: str
