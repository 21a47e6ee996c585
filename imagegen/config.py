"""Configuration loader for the image generator.

Loads config/imagegen.yaml (or the file named by IMAGEGEN_CONFIG) and layers
it over built-in defaults. Credentials never live in YAML; they come from
the environment and are passed in explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict

from imagegen.errors import MissingCredentialError

WORKSPACE = Path(__file__).resolve().parent.parent
CONFIG_PATH = WORKSPACE / "config" / "imagegen.yaml"

API_KEY_ENV = "GEMINI_API_KEY"
CONFIG_ENV = "IMAGEGEN_CONFIG"

DEFAULT_MODEL = "gemini-3-pro-image-preview"
FALLBACK_MODEL = "gemini-2.5-flash-image"
DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_OUTPUT_DIR = "./output"


class Settings(BaseModel):
    """Resolved defaults plus the API credential."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    model: str = DEFAULT_MODEL
    fallback_model: str = FALLBACK_MODEL
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    output_dir: str = DEFAULT_OUTPUT_DIR
    prompt_preview_chars: int = 90


def config_path(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    override = env.get(CONFIG_ENV, "")
    return Path(override) if override else CONFIG_PATH


def load_imagegen_config(path: Path | None = None) -> dict[str, Any]:
    """Load config/imagegen.yaml. Missing file → empty dict."""
    path = path or CONFIG_PATH
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text()) or {}


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from YAML defaults and the given environment.

    Raises MissingCredentialError when GEMINI_API_KEY is absent or blank.
    """
    env = os.environ if env is None else env
    api_key = env.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise MissingCredentialError(API_KEY_ENV)

    raw = load_imagegen_config(config_path(env))
    known = {k: v for k, v in raw.items() if k in Settings.model_fields and k != "api_key"}
    return Settings(api_key=api_key, **known)
