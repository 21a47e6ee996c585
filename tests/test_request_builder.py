"""Tests for the Request Builder.

Covers:
- Aspect ratio validation and content-type defaults
- Reference image MIME mapping and failure modes
- Prompt section assembly (brand on/off, content type)
- Part ordering with and without a reference image
"""

from __future__ import annotations

from pathlib import Path

import pytest

from imagegen.brand import BRAND_STYLE, CONTENT_TYPE_STYLES, ContentType
from imagegen.errors import (
    InvalidSizeError,
    MissingPromptError,
    ReferenceNotFoundError,
    UnknownContentTypeError,
    UnsupportedFormatError,
    UsageError,
)
from imagegen.models import AspectRatio, InvocationParameters
from imagegen.request_builder import (
    REFERENCE_INSTRUCTION,
    build_request,
    compose_prompt,
    load_reference,
    mime_type_for,
    parse_content_type,
    resolve_aspect_ratio,
)


def _params(tmp_path: Path, **overrides) -> InvocationParameters:
    fields = {
        "prompt": "Busy front desk at a clinic",
        "model": "gemini-3-pro-image-preview",
        "out_dir": tmp_path / "output",
    }
    fields.update(overrides)
    return InvocationParameters(**fields)


class TestAspectRatio:
    """Only the five supported ratios get through."""

    @pytest.mark.parametrize("size", ["1:1", "16:9", "9:16", "4:3", "3:4"])
    def test_valid_sizes_build(self, tmp_path, size):
        payload = build_request(_params(tmp_path, size=size), default_size="16:9")
        assert payload.aspect_ratio.value == size

    @pytest.mark.parametrize("size", ["", "2:1", "16x9", "1:1 ", "square", "3:1"])
    def test_invalid_sizes_rejected(self, tmp_path, size):
        with pytest.raises(InvalidSizeError) as exc:
            build_request(_params(tmp_path, size=size), default_size="16:9")
        assert "Invalid aspect ratio" in str(exc.value)
        assert isinstance(exc.value, UsageError)

    def test_blog_defaults_to_wide(self):
        assert resolve_aspect_ratio(None, ContentType.BLOG, "1:1") == AspectRatio.WIDE

    def test_social_defaults_to_square(self):
        assert resolve_aspect_ratio(None, ContentType.SOCIAL, "16:9") == AspectRatio.SQUARE

    def test_explicit_size_beats_content_type(self):
        assert resolve_aspect_ratio("9:16", ContentType.SOCIAL, "16:9") == AspectRatio.TALL

    def test_global_default_without_type(self):
        assert resolve_aspect_ratio(None, None, "4:3") == AspectRatio.LANDSCAPE

    def test_bad_global_default_rejected(self):
        with pytest.raises(InvalidSizeError):
            resolve_aspect_ratio(None, None, "21:9")


class TestContentType:

    @pytest.mark.parametrize("tag", ["blog", "social", "hero", "email", "BLOG"])
    def test_known_tags(self, tag):
        assert parse_content_type(tag) == ContentType(tag.lower())

    def test_missing_tag_is_none(self):
        assert parse_content_type(None) is None
        assert parse_content_type("") is None

    def test_unknown_tag_rejected(self):
        with pytest.raises(UnknownContentTypeError) as exc:
            parse_content_type("poster")
        assert "poster" in str(exc.value)


class TestReferenceImage:

    @pytest.mark.parametrize("name,expected", [
        ("ref.jpg", "image/jpeg"),
        ("ref.jpeg", "image/jpeg"),
        ("ref.JPG", "image/jpeg"),
        ("ref.png", "image/png"),
        ("ref.webp", "image/webp"),
        ("ref.gif", "image/gif"),
    ])
    def test_mime_mapping(self, name, expected):
        assert mime_type_for(Path(name)) == expected

    @pytest.mark.parametrize("name", ["ref.bmp", "ref.tiff", "ref.svg", "ref"])
    def test_unsupported_extension(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b"data")
        with pytest.raises(UnsupportedFormatError) as exc:
            load_reference(path)
        assert "Unsupported image format" in str(exc.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReferenceNotFoundError) as exc:
            load_reference(tmp_path / "nope.png")
        assert "nope.png" in str(exc.value)

    def test_missing_file_checked_before_format(self, tmp_path):
        """A missing .bmp is reported as missing, not unsupported."""
        with pytest.raises(ReferenceNotFoundError):
            load_reference(tmp_path / "nope.bmp")

    def test_loads_bytes(self, tmp_path):
        path = tmp_path / "brand.webp"
        path.write_bytes(b"RIFF....WEBP")
        image = load_reference(path)
        assert image.mime_type == "image/webp"
        assert image.data == b"RIFF....WEBP"


class TestComposePrompt:

    def test_subject_only_without_brand(self):
        text = compose_prompt("A patient checking in", include_brand=False)
        assert text == "Subject:\nA patient checking in"
        assert BRAND_STYLE not in text

    def test_brand_included_by_default(self):
        text = compose_prompt("A patient checking in")
        assert text.startswith("Subject:\nA patient checking in\n\n")
        assert "Brand style guide:\n" + BRAND_STYLE in text

    def test_content_type_section_last(self):
        text = compose_prompt("Launch post", ContentType.BLOG)
        assert text.endswith("Content type (blog):\n" + CONTENT_TYPE_STYLES[ContentType.BLOG])
        assert text.index("Brand style guide:") < text.index("Content type (blog):")

    def test_no_brand_keeps_content_type(self):
        text = compose_prompt("Launch post", ContentType.EMAIL, include_brand=False)
        assert BRAND_STYLE not in text
        assert CONTENT_TYPE_STYLES[ContentType.EMAIL] in text


class TestBuildRequest:

    def test_empty_prompt_rejected(self, tmp_path):
        with pytest.raises(MissingPromptError):
            build_request(_params(tmp_path, prompt="   "), default_size="16:9")

    def test_text_only_request(self, tmp_path):
        payload = build_request(_params(tmp_path), default_size="16:9")
        assert payload.role == "user"
        assert len(payload.parts) == 1
        assert payload.parts[0].text == payload.composed_prompt
        assert payload.parts[0].inline_data is None

    def test_reference_image_goes_first(self, tmp_path):
        ref = tmp_path / "style.png"
        ref.write_bytes(b"\x89PNG fake")
        payload = build_request(_params(tmp_path, ref_path=ref), default_size="16:9")

        assert len(payload.parts) == 2
        image, text = payload.parts
        assert image.inline_data is not None
        assert image.inline_data.mime_type == "image/png"
        assert image.inline_data.data == b"\x89PNG fake"
        assert text.text.startswith(REFERENCE_INSTRUCTION)
        assert text.text.endswith(payload.composed_prompt)
        assert "Do not reproduce any text, logos, or" in text.text

    def test_no_brand_flag_drops_brand_text(self, tmp_path):
        payload = build_request(_params(tmp_path, include_brand=False), default_size="16:9")
        assert BRAND_STYLE not in payload.parts[0].text

    def test_size_checked_before_reference(self, tmp_path):
        """Invalid size fails even when the reference is also bad."""
        with pytest.raises(InvalidSizeError):
            build_request(
                _params(tmp_path, size="5:4", ref_path=tmp_path / "missing.png"),
                default_size="16:9",
            )

    def test_content_type_default_size_applied(self, tmp_path):
        payload = build_request(
            _params(tmp_path, content_type=ContentType.SOCIAL), default_size="16:9"
        )
        assert payload.aspect_ratio == AspectRatio.SQUARE
