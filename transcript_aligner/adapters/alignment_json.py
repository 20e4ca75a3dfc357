"""Adapter: forced-aligner JSON to Word list.

WHY: Forced aligners (Montreal Forced Aligner, Prosodylab-Aligner, WhisperX
alignment) export per-word timings in a handful of slightly different JSON
layouts. The engine only understands Words, so this adapter recognises
the common layouts and maps them onto one shape.

HOW: Three accepted layouts, checked in order:
  1. A bare list of word entries
  2. An object with a "words" list of word entries
  3. TextGrid-style {"tiers": {"words": {"entries": [[start, end, label], ...]}}}
Word entries are objects; text comes from "punctuated_word", "word" or
"label" (first non-empty), start from "start" or "begin", end from "end".
The mapped words are passed through interpolate_timestamps so that every
aligner word carries a time before it is used as a timing source.

RULES:
- Anything that is none of the three layouts raises UnsupportedFormatError
  naming all three
- Entries that are not objects (or TextGrid rows shorter than 3) raise too
- Missing, malformed or negative times become None before interpolation
- An end earlier than its start is dropped
- Numbers are 1-based in input order
"""

from __future__ import annotations

from typing import Any, Dict, List

from transcript_aligner.adapters._values import first_present, first_text, timing_pair
from transcript_aligner.adapters.errors import UnsupportedFormatError
from transcript_aligner.core.interpolate import interpolate_timestamps
from transcript_aligner.core.ir import Word, WordSequence

_EXPECTED_SHAPES = (
    "Unsupported alignment JSON structure. Expected an array of words, "
    "an object with a 'words' array, or a TextGrid JSON object "
    "(tiers.words.entries as [start, end, label] rows)."
)


def _textgrid_entries(data: Dict[str, Any]) -> List[Dict[str, Any]] | None:
    tiers = data.get("tiers")
    if not isinstance(tiers, dict):
        return None
    words_tier = tiers.get("words")
    if not isinstance(words_tier, dict):
        return None
    entries = words_tier.get("entries")
    if not isinstance(entries, list):
        return None

    items = []
    for row in entries:
        if not isinstance(row, (list, tuple)) or len(row) < 3:
            raise UnsupportedFormatError(
                "TextGrid entry {!r} is not a [start, end, label] row.".format(row)
            )
        items.append({"start": row[0], "end": row[1], "word": row[2]})
    return items


def _extract_entries(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if isinstance(data.get("words"), list):
            return data["words"]
        items = _textgrid_entries(data)
        if items is not None:
            return items
    raise UnsupportedFormatError(_EXPECTED_SHAPES)


def parse_alignment_json(data: Any) -> WordSequence:
    """Convert decoded forced-aligner JSON into interpolated Words.

    Args:
        data: The decoded JSON document.

    Returns:
        Words in input order, every one timed.

    Raises:
        UnsupportedFormatError: If the document matches no known layout.
    """
    entries = _extract_entries(data)

    words: WordSequence = []
    for index, item in enumerate(entries, start=1):
        if not isinstance(item, dict):
            raise UnsupportedFormatError(
                "Word entry {} is not an object: {!r}".format(index, item)
            )
        start, end = timing_pair(first_present(item, "start", "begin"), item.get("end"))
        words.append(Word(
            number=index,
            text=first_text(item, "punctuated_word", "word", "label"),
            start=start,
            end=end,
        ))

    return interpolate_timestamps(words)
