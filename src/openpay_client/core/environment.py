"""
Layered lookup of ``OPENPAY_*`` settings: process environment, then an
optional .env file, then explicit overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

__all__ = ["build_environment", "read_env_file"]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines; a missing file yields an empty mapping."""
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}

    values: Dict[str, str] = {}
    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = _unquote(value.strip())
    return values


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    ``base`` defaults to :data:`os.environ`. The ``env_file`` only fills keys
    missing from it (``None`` skips the file) and ``overrides`` always win.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)
    if env_file is not None:
        for key, value in read_env_file(Path(env_file)).items():
            merged.setdefault(key, value)
    merged.update(overrides or {})
    return merged
