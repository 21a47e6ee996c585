"""Response Extractor — find the generated image and write it to disk.

Scan order is candidates, then parts within each candidate; the first part
carrying inline image data wins and both loops stop. No ranking.

Output files are named:

    <UTC YYYY-MM-DDTHH-MM-SS>--[<content-type>--]<slug>.png

Two runs in the same second with the same prompt overwrite each other.
"""

from __future__ import annotations

import base64
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from imagegen.brand import ContentType
from imagegen.errors import NoImageReturnedError

log = logging.getLogger("imagegen.extract")

SLUG_MAX_LEN = 45
TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str, max_len: int = SLUG_MAX_LEN) -> str:
    """'Hero Banner!!' → 'hero-banner'. Truncation happens after stripping."""
    slug = _NON_ALNUM.sub("-", text.lower()).strip("-")
    return slug[:max_len]


def _parts_of(candidate: Any) -> list[Any]:
    content = getattr(candidate, "content", None)
    return list(getattr(content, "parts", None) or [])


def _decode(data: bytes | str) -> bytes:
    # The SDK hands back raw bytes; a base64 string only shows up from raw JSON.
    if isinstance(data, str):
        return base64.b64decode(data)
    return data


def find_image_bytes(response: Any) -> bytes | None:
    """Return bytes of the first image-bearing part across all candidates."""
    for ci, candidate in enumerate(getattr(response, "candidates", None) or []):
        for pi, part in enumerate(_parts_of(candidate)):
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                log.debug("Image found in candidate %d part %d (%s)", ci, pi, inline.mime_type)
                return _decode(inline.data)
    return None


def refusal_text(response: Any) -> str:
    """Text of the first text-bearing part of the first candidate, or ''."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    for part in _parts_of(candidates[0]):
        text = getattr(part, "text", None)
        if text:
            return text
    return ""


def build_filename(
    prompt: str,
    content_type: ContentType | None = None,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
    pieces = [stamp]
    if content_type is not None:
        pieces.append(content_type.value)
    pieces.append(slugify(prompt))
    return "--".join(pieces) + ".png"


def save_image(
    image: bytes,
    out_dir: Path,
    prompt: str,
    content_type: ContentType | None = None,
    now: datetime | None = None,
) -> Path:
    """Write image bytes under out_dir (created if missing). Single, non-atomic write."""
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / build_filename(prompt, content_type, now)
    out_path.write_bytes(image)
    log.debug("Wrote %d bytes to %s", len(image), out_path)
    return out_path


def extract_and_save(
    response: Any,
    out_dir: Path,
    prompt: str,
    content_type: ContentType | None = None,
    now: datetime | None = None,
) -> Path:
    """Persist the first image in the response.

    Raises:
        NoImageReturnedError: no part carried image data; model_text holds
            the first candidate's text (typically a refusal) when present
    """
    image = find_image_bytes(response)
    if image is None:
        raise NoImageReturnedError(refusal_text(response))
    return save_image(image, out_dir, prompt, content_type, now)


def diagnose_failure(message: str, model: str, fallback_model: str) -> list[str]:
    """Best-effort hints keyed on the provider's error wording. At most one applies."""
    if "API_KEY" in message:
        return ["Check that your GEMINI_API_KEY is correct and has not expired."]
    if "404" in message or "not found" in message.lower():
        return [
            f'Model "{model}" may not be available yet in your region or account tier.',
            f"Try: --model {fallback_model}",
        ]
    if "SAFETY" in message or "blocked" in message.lower():
        return ["The prompt was blocked by safety filters. Try rephrasing."]
    return []
