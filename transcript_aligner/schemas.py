"""Access to the words JSON schema shipped with the package.

The schema file is read once and cached; both the words JSON adapter
and the words JSON formatter validate against it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_WORDS_SCHEMA_PATH = Path(__file__).resolve().parent / "words_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_words_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_WORDS_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA
