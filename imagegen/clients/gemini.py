"""Gemini API client — single image-generation call.

Used by:
- imagegen.cli (one call per invocation)

No retry, no timeout override, no rate limiting: one call, and whatever the
SDK raises becomes a GenerationFailedError for the CLI to report.
"""

from __future__ import annotations

import logging

from google import genai
from google.genai import types

from imagegen.errors import GenerationFailedError
from imagegen.models import RequestPart, RequestPayload

log = logging.getLogger("imagegen.clients.gemini")


def to_sdk_part(part: RequestPart) -> types.Part:
    """Convert a RequestPart to the SDK type. The SDK base64-encodes bytes on the wire."""
    if part.inline_data is not None:
        return types.Part(
            inline_data=types.Blob(
                mime_type=part.inline_data.mime_type,
                data=part.inline_data.data,
            )
        )
    return types.Part(text=part.text)


def to_sdk_contents(payload: RequestPayload) -> list[types.Content]:
    return [
        types.Content(
            role=payload.role,
            parts=[to_sdk_part(p) for p in payload.parts],
        )
    ]


def image_config(payload: RequestPayload) -> types.GenerateContentConfig:
    """Image-only output at the resolved aspect ratio."""
    return types.GenerateContentConfig(
        response_modalities=["IMAGE"],
        image_config=types.ImageConfig(aspect_ratio=payload.aspect_ratio.value),
    )


class GeminiClient:
    """Google Gemini image generation via the async SDK surface."""

    def __init__(self, api_key: str):
        self.api_key = api_key
        self._client = genai.Client(api_key=api_key)

    async def generate(self, payload: RequestPayload, model: str) -> types.GenerateContentResponse:
        """Send one generate_content request.

        Raises:
            GenerationFailedError: anything the SDK raised, message preserved verbatim
        """
        log.debug("generate_content model=%s parts=%d", model, len(payload.parts))
        try:
            return await self._client.aio.models.generate_content(
                model=model,
                contents=to_sdk_contents(payload),
                config=image_config(payload),
            )
        except Exception as e:
            log.debug("generate_content failed: %r", e)
            raise GenerationFailedError(str(e), model=model) from e
