"""Brand image generator — command-line entry point.

Generates images via Google Gemini for blog posts, social cards, landing-page
heroes and email headers, with the Solv brand style appended to every prompt.

Usage:
    imagegen "your prompt" [options]
    python3 -m imagegen.cli "your prompt" [options]

Options:
    --type <t>      blog | social | hero | email  (adds layout guidance + default size)
    --ref <path>    Reference image, used only as a visual style guide
    --size <ratio>  1:1 | 16:9 | 9:16 | 4:3 | 3:4
    --model <id>    Override the model
    --out <dir>     Output directory (default: ./output)
    --no-brand      Do not append the brand style guide
    -v, --verbose   Debug logging

Exit status is 0 only when an image file was written.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Any, Mapping, NoReturn, Sequence

from dotenv import load_dotenv

from imagegen.brand import ContentType
from imagegen.clients.gemini import GeminiClient
from imagegen.config import API_KEY_ENV, Settings, load_settings
from imagegen.errors import (
    GenerationFailedError,
    MissingCredentialError,
    NoImageReturnedError,
    UsageError,
)
from imagegen.extract import diagnose_failure, extract_and_save
from imagegen.models import AspectRatio, InvocationParameters, RequestPayload
from imagegen.request_builder import build_request, parse_content_type

log = logging.getLogger("imagegen.cli")


class _Parser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad flags; every usage error here is status 1."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="imagegen", description="Brand image generator (Google Gemini)", add_help=True)
    parser.add_argument("prompt", nargs="*", help="Prompt words, joined with spaces")
    parser.add_argument("--type", dest="content_type", help="blog | social | hero | email")
    parser.add_argument("--ref", dest="ref_path", help="Reference image path (style guide only)")
    parser.add_argument("--size", help=" | ".join(AspectRatio.values()))
    parser.add_argument("--model", help="Model ID")
    parser.add_argument("--out", dest="out_dir", help="Output directory")
    parser.add_argument("--no-brand", dest="include_brand", action="store_false",
                        help="Skip the brand style guide")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def print_usage() -> None:
    print(f"""
  Brand Image Generator

  Usage:
    imagegen "prompt" [options]

  Options:
    --type <type>   {" | ".join(ct.value for ct in ContentType)}
    --ref <path>    Reference image path (used as style guide)
    --size <ratio>  {" | ".join(AspectRatio.values())}
    --model <id>    Model ID
    --out <dir>     Output directory  (default: ./output)
    --no-brand      Do not append the brand style guide

  Examples:
    imagegen "Hero banner for an urgent care website, clean and professional" --type hero
    imagegen "Blog header: the future of urgent care operations" --type blog
    imagegen "Match this visual style, new scene: a patient checking in" --ref ./ref.png
    imagegen "Square social card, bold typography" --size 1:1
""")


def print_missing_key() -> None:
    print(f"""
  Error: {API_KEY_ENV} is not set.

  1. Copy .env.example to .env
  2. Add your API key: {API_KEY_ENV}=your_key_here
  3. Get a key at: https://aistudio.google.com/app/apikey
""", file=sys.stderr)


def print_summary(params: InvocationParameters, payload: RequestPayload, preview_chars: int) -> None:
    prompt = params.prompt
    preview = prompt[:preview_chars] + ("…" if len(prompt) > preview_chars else "")
    lines = [
        "",
        f"  Model   {params.model}",
        f"  Size    {payload.aspect_ratio.value}",
    ]
    if params.content_type is not None:
        lines.append(f"  Type    {params.content_type.value}")
    lines.append(f"  Brand   {'on' if params.include_brand else 'off'}")
    lines.append(f"  Prompt  {preview}")
    if params.ref_path is not None:
        lines.append(f"  Ref     {params.ref_path}")
    lines += ["", "  Generating…"]
    print("\n".join(lines))


def parameters_from_args(args: argparse.Namespace, prompt: str, settings: Settings) -> InvocationParameters:
    return InvocationParameters(
        prompt=prompt,
        content_type=parse_content_type(args.content_type),
        ref_path=Path(args.ref_path) if args.ref_path else None,
        size=args.size,
        model=args.model or settings.model,
        out_dir=Path(args.out_dir or settings.output_dir),
        include_brand=args.include_brand,
    )


async def generate(settings: Settings, payload: RequestPayload, model: str) -> Any:
    """The one network call of the run."""
    client = GeminiClient(api_key=settings.api_key)
    return await client.generate(payload, model)


def run(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    """Parse → validate → build → call → extract. Returns the exit status.

    env defaults to os.environ (after loading .env); tests pass a dict.
    """
    parser = build_parser()
    try:
        # Intermixed so prompt words may appear on either side of flags.
        args, unknown = parser.parse_known_intermixed_args(argv)
    except UsageError as e:
        print(f"  Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    for flag in unknown:
        print(f"  Warning: ignoring unknown option {flag}", file=sys.stderr)

    prompt = " ".join(args.prompt).strip()
    if not prompt:
        print_usage()
        return 1

    if env is None:
        load_dotenv()
        env = os.environ

    try:
        settings = load_settings(env)
    except MissingCredentialError:
        print_missing_key()
        return 1

    log.debug("Settings: model=%s default_size=%s out=%s", settings.model, settings.aspect_ratio, settings.output_dir)

    try:
        params = parameters_from_args(args, prompt, settings)
        payload = build_request(params, default_size=settings.aspect_ratio)
    except UsageError as e:
        print(f"  Error: {e}", file=sys.stderr)
        return 1

    print_summary(params, payload, settings.prompt_preview_chars)

    try:
        response = asyncio.run(generate(settings, payload, params.model))
    except GenerationFailedError as e:
        print(f"\n  Generation failed: {e.message}\n", file=sys.stderr)
        for hint in diagnose_failure(e.message, params.model, settings.fallback_model):
            print(f"  → {hint}", file=sys.stderr)
        return 1

    try:
        out_path = extract_and_save(response, params.out_dir, params.prompt, params.content_type)
    except NoImageReturnedError as e:
        print(f"\n  {e}", file=sys.stderr)
        if e.model_text:
            print(f"  Model responded with text: {e.model_text}", file=sys.stderr)
        return 1

    print(f"\n  ✓ Saved: {out_path}\n")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
