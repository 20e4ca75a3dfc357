"""Adapter: this tool's own words JSON back to a Word list.

WHY: A reconciled transcript saved as words JSON is often edited and run
through the engine again (re-timing after edits, applying a newer ASR
pass). Reading it back must preserve speakers, paragraph breaks and the
gaps the user left untimed.

HOW: Validate against the packaged words schema, then map each entry
onto a Word. No interpolation here — untimed words are meaningful input
for the next engine call.

RULES:
- Documents failing the schema raise UnsupportedFormatError
- A word whose end is before its start raises UnsupportedFormatError
- Numbers are reassigned 1..n in document order
"""

from __future__ import annotations

from typing import Any, Optional

import jsonschema

from transcript_aligner.adapters.errors import UnsupportedFormatError
from transcript_aligner.core.ir import Word, WordSequence
from transcript_aligner.schemas import get_words_schema


def _seconds(value: Optional[float]) -> Optional[float]:
    return float(value) if value is not None else None


def parse_words_json(data: Any) -> WordSequence:
    """Convert a decoded words JSON document into Words.

    Raises:
        UnsupportedFormatError: If the document does not match the schema.
    """
    try:
        jsonschema.validate(instance=data, schema=get_words_schema())
    except jsonschema.ValidationError as exc:
        raise UnsupportedFormatError(
            "Unsupported words JSON structure. Expected an object with a "
            "'words' array of {{text, start, end, speaker, paragraph_start}} "
            "entries ({}).".format(exc.message)
        ) from exc

    words: WordSequence = []
    for index, item in enumerate(data["words"], start=1):
        start = _seconds(item.get("start"))
        end = _seconds(item.get("end"))
        if start is not None and end is not None and end < start:
            raise UnsupportedFormatError(
                "Word {} in words JSON ends before it starts ({} < {}).".format(index, end, start)
            )
        words.append(Word(
            number=index,
            text=item["text"],
            start=start,
            end=end,
            speaker=item.get("speaker"),
            is_paragraph_start=bool(item.get("paragraph_start", False)),
        ))
    return words
