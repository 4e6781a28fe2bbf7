"""YAML-based conversion profiles.

A profile has a ``default`` block and per-domain overrides::

    default:
      chunk_size: 2000
    domains:
      x.com:
        source: social
      docs.python.org:
        chunk_size: 4000
        detect_language: true

The longest domain key matching the URL host (exactly, or as a parent
domain) is merged over ``default``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from agentmd.errors import ProfileError

PROFILE_KEYS: frozenset[str] = frozenset({"source", "chunk_size", "detect_language"})


def load_profile(path: str | Path, url: str = "") -> dict[str, Any]:
    """Load the YAML profile at *path* and return the settings that apply to *url*.

    Unknown keys are ignored.

    Raises:
        ProfileError: if the file cannot be read or parsed, is not a
            mapping, or sets a non-integer ``chunk_size``.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ProfileError(f"Cannot load profile {path}: {exc}", path=str(path)) from exc
    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must be a mapping", path=str(path))

    default = data.get("default", {})
    domains = data.get("domains", {})

    netloc = urlparse(url).netloc.lower() if url else ""
    best_key = ""
    best_cfg: dict[str, Any] = {}
    if netloc and isinstance(domains, dict):
        for key, cfg in domains.items():
            if not isinstance(key, str) or not isinstance(cfg, dict):
                continue
            key_lower = key.lower()
            if (netloc == key_lower or netloc.endswith("." + key_lower)) and (
                len(key_lower) > len(best_key)
            ):
                best_key = key_lower
                best_cfg = cfg

    merged: dict[str, Any] = {}
    if isinstance(default, dict):
        merged.update(default)
    merged.update(best_cfg)

    chunk_size = merged.get("chunk_size")
    if chunk_size is not None and (isinstance(chunk_size, bool) or not isinstance(chunk_size, int)):
        raise ProfileError(
            f"Profile {path}: chunk_size must be an integer, got {chunk_size!r}",
            path=str(path),
        )
    return {k: v for k, v in merged.items() if k in PROFILE_KEYS}
