"""Configuration defaults and .env loading.

WHY: Centralizes the values users may want to change without touching
code — the default matching method, the windowed matcher's lookahead,
the largest alignment the CLI will attempt, and the log level.

HOW: python-dotenv loads the .env file on import. Each setting is a
module-level constant read from the environment with a default.

RULES:
- All settings can be overridden via environment variables (or .env)
- Malformed integer settings raise ValueError naming the variable
- Engine scoring constants are NOT configurable; they live in core.aligner
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the tool is run from)
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}".format(name, raw)
        ) from None


DEFAULT_METHOD = os.getenv("TRANSCRIPT_ALIGNER_METHOD", "align")
"""Matching method used when --method is not given ("align" or "windowed")."""

DEFAULT_LOOKAHEAD = _env_int("TRANSCRIPT_ALIGNER_LOOKAHEAD", 6)

MAX_ALIGNMENT_CELLS = _env_int("TRANSCRIPT_ALIGNER_MAX_CELLS", 25_000_000)
"""Largest (n+1)*(m+1) score matrix the CLI will build before refusing."""

LOG_LEVEL = os.getenv("TRANSCRIPT_ALIGNER_LOG_LEVEL", "WARNING").upper()
