"""Request Builder — turns invocation parameters into an ordered request.

Prompt layout (sections joined by a blank line, each under a label line):

    Subject:            always, the raw user prompt
    Brand style guide:  unless --no-brand
    Content type (x):   when --type is given

With a reference image the request is [image, text]; the image goes first
because the model attends to part order. Without one it is [text].

Every check here runs before any network call. Failures raise a UsageError
subclass; nothing in this module exits the process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType

from imagegen.brand import BRAND_STYLE, CONTENT_TYPE_SIZES, CONTENT_TYPE_STYLES, ContentType
from imagegen.errors import (
    InvalidSizeError,
    MissingPromptError,
    ReferenceNotFoundError,
    UnknownContentTypeError,
    UnsupportedFormatError,
)
from imagegen.models import (
    AspectRatio,
    InlineImage,
    InvocationParameters,
    RequestPart,
    RequestPayload,
)

log = logging.getLogger("imagegen.request_builder")

MIME_TYPES = MappingProxyType({
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
})

REFERENCE_INSTRUCTION = (
    "Use the provided image strictly as a visual style reference — match its color palette, "
    "lighting, composition style, and overall aesthetic. Do not reproduce any text, logos, or "
    "UI elements from the reference. Generate a new image described as:"
)

SUBJECT_LABEL = "Subject:"
BRAND_LABEL = "Brand style guide:"


def parse_content_type(tag: str | None) -> ContentType | None:
    """Map a --type value to ContentType. None/empty → None."""
    if not tag:
        return None
    try:
        return ContentType(tag.strip().lower())
    except ValueError:
        raise UnknownContentTypeError(tag, [ct.value for ct in ContentType]) from None


def validate_aspect_ratio(size: str) -> AspectRatio:
    try:
        return AspectRatio(size)
    except ValueError:
        raise InvalidSizeError(size, AspectRatio.values()) from None


def resolve_aspect_ratio(
    size: str | None,
    content_type: ContentType | None,
    default: str,
) -> AspectRatio:
    """Explicit --size wins, then the content type's default, then the global default."""
    if size is not None:
        return validate_aspect_ratio(size)
    if content_type is not None:
        return validate_aspect_ratio(CONTENT_TYPE_SIZES[content_type])
    return validate_aspect_ratio(default)


def mime_type_for(path: Path) -> str:
    ext = path.suffix.lower()
    mime_type = MIME_TYPES.get(ext)
    if mime_type is None:
        raise UnsupportedFormatError(ext, list(MIME_TYPES))
    return mime_type


def load_reference(path: Path) -> InlineImage:
    """Read a reference image from disk. Existence is checked before format."""
    if not path.is_file():
        raise ReferenceNotFoundError(str(path))
    mime_type = mime_type_for(path)
    data = path.read_bytes()
    log.debug("Loaded reference %s (%s, %d bytes)", path, mime_type, len(data))
    return InlineImage(mime_type=mime_type, data=data)


def compose_prompt(
    prompt: str,
    content_type: ContentType | None = None,
    include_brand: bool = True,
) -> str:
    sections = [f"{SUBJECT_LABEL}\n{prompt.strip()}"]
    if include_brand:
        sections.append(f"{BRAND_LABEL}\n{BRAND_STYLE}")
    if content_type is not None:
        sections.append(
            f"Content type ({content_type.value}):\n{CONTENT_TYPE_STYLES[content_type]}"
        )
    return "\n\n".join(sections)


def build_request(params: InvocationParameters, default_size: str) -> RequestPayload:
    """Validate params and assemble the ordered request parts.

    Args:
        params: Parsed invocation parameters
        default_size: Aspect ratio used when neither --size nor --type is given

    Returns:
        RequestPayload with parts in send order and the resolved aspect ratio

    Raises:
        MissingPromptError, InvalidSizeError, ReferenceNotFoundError,
        UnsupportedFormatError
    """
    if not params.prompt.strip():
        raise MissingPromptError()

    aspect_ratio = resolve_aspect_ratio(params.size, params.content_type, default_size)
    composed = compose_prompt(params.prompt, params.content_type, params.include_brand)

    parts: list[RequestPart] = []
    if params.ref_path is not None:
        reference = load_reference(params.ref_path)
        parts.append(RequestPart(inline_data=reference))
        parts.append(RequestPart(text=f"{REFERENCE_INSTRUCTION}\n\n{composed}"))
    else:
        parts.append(RequestPart(text=composed))

    log.debug(
        "Built request: %d part(s), aspect %s, brand=%s, type=%s",
        len(parts),
        aspect_ratio.value,
        params.include_brand,
        params.content_type.value if params.content_type else "-",
    )
    return RequestPayload(parts=parts, aspect_ratio=aspect_ratio, composed_prompt=composed)
