"""Error taxonomy for the image generator.

Three families, all terminal for the process:
- Usage errors: bad input detected before any network call
- Remote-call errors: the Gemini client raised
- Empty-result errors: the call succeeded but carried no image

Library code raises these; only the CLI turns them into exit codes.
"""

from __future__ import annotations


class ImageGenError(Exception):
    """Base error. Every subclass maps to exit status 1."""

    exit_code = 1


# ── Usage ────────────────────────────────────────────────────────────


class UsageError(ImageGenError):
    """Invalid invocation detected before the request is built."""


class MissingPromptError(UsageError):
    def __init__(self) -> None:
        super().__init__("A prompt is required")


class MissingCredentialError(UsageError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is not set")
        self.variable = variable


class InvalidSizeError(UsageError):
    def __init__(self, size: str, valid: list[str]) -> None:
        super().__init__(
            f'Invalid aspect ratio "{size}"\n  Valid options: {", ".join(valid)}'
        )
        self.size = size


class UnknownContentTypeError(UsageError):
    def __init__(self, content_type: str, valid: list[str]) -> None:
        super().__init__(
            f'Unknown content type "{content_type}"\n  Valid options: {", ".join(valid)}'
        )
        self.content_type = content_type


class ReferenceNotFoundError(UsageError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Reference image not found: {path}")
        self.path = path


class UnsupportedFormatError(UsageError):
    def __init__(self, extension: str, supported: list[str]) -> None:
        super().__init__(
            f'Unsupported image format "{extension}"\n  Supported: {", ".join(supported)}'
        )
        self.extension = extension


# ── Remote call ──────────────────────────────────────────────────────


class GenerationFailedError(ImageGenError):
    """The Gemini call raised. Never retried."""

    def __init__(self, message: str, model: str = ""):
        super().__init__(message)
        self.message = message
        self.model = model


# ── Empty result ─────────────────────────────────────────────────────


class NoImageReturnedError(ImageGenError):
    """Response parsed fine but no part carried image bytes."""

    def __init__(self, model_text: str = "") -> None:
        super().__init__("No image was returned in the response.")
        self.model_text = model_text
