"""Brand image generator — prompt in, on-brand PNG out.

One invocation makes one Google Gemini call:

Request:   imagegen/request_builder.py (prompt sections, reference image, aspect ratio)
Client:    imagegen/clients/gemini.py  (async google-genai call, no retry)
Response:  imagegen/extract.py         (first inline image wins, slugged filename)
Brand:     imagegen/brand.py           (style guide + per-content-type layout text)
"""

from imagegen.brand import BRAND_STYLE, CONTENT_TYPE_SIZES, CONTENT_TYPE_STYLES, ContentType
from imagegen.errors import (
    GenerationFailedError,
    ImageGenError,
    InvalidSizeError,
    MissingCredentialError,
    MissingPromptError,
    NoImageReturnedError,
    ReferenceNotFoundError,
    UnknownContentTypeError,
    UnsupportedFormatError,
    UsageError,
)
from imagegen.extract import build_filename, diagnose_failure, extract_and_save, slugify
from imagegen.models import AspectRatio, InvocationParameters, RequestPart, RequestPayload
from imagegen.request_builder import build_request, compose_prompt

__all__ = [
    # Brand
    "BRAND_STYLE",
    "CONTENT_TYPE_SIZES",
    "CONTENT_TYPE_STYLES",
    "ContentType",
    # Models
    "AspectRatio",
    "InvocationParameters",
    "RequestPart",
    "RequestPayload",
    # Request / response
    "build_request",
    "compose_prompt",
    "build_filename",
    "diagnose_failure",
    "extract_and_save",
    "slugify",
    # Errors
    "ImageGenError",
    "UsageError",
    "MissingPromptError",
    "MissingCredentialError",
    "InvalidSizeError",
    "UnknownContentTypeError",
    "ReferenceNotFoundError",
    "UnsupportedFormatError",
    "GenerationFailedError",
    "NoImageReturnedError",
]

__version__ = "0.1.0"
