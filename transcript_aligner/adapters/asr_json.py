"""Adapter: nested ASR result JSON to Word list.

WHY: Cloud ASR services (Deepgram-style responses, and Whisper outputs
converted to the same layout) return word timings several levels deep
inside a results envelope. The engine needs them as a flat Word list.

HOW: The envelope is checked against a small JSON schema that requires
results.channels[0].alternatives[0].words to be an array. Each word's text
is "punctuated_word" or "word"; "speaker" is carried through as a string.
The mapped words are interpolated like the aligner adapter's output.

RULES:
- Missing path or non-array words raises UnsupportedFormatError naming
  the expected path
- Only the first channel and first alternative are read
- Non-object word entries raise UnsupportedFormatError
- Negative times become None; an end earlier than its start is dropped
"""

from __future__ import annotations

from typing import Any, Dict

import jsonschema

from transcript_aligner.adapters._values import first_text, timing_pair
from transcript_aligner.adapters.errors import UnsupportedFormatError
from transcript_aligner.core.interpolate import interpolate_timestamps
from transcript_aligner.core.ir import Word, WordSequence

# Only the path down to the words array is constrained; everything else
# in the envelope (metadata, confidences, paragraphs) is ignored.
ASR_ENVELOPE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["results"],
    "properties": {
        "results": {
            "type": "object",
            "required": ["channels"],
            "properties": {
                "channels": {
                    "type": "array",
                    "minItems": 1,
                    "prefixItems": [{
                        "type": "object",
                        "required": ["alternatives"],
                        "properties": {
                            "alternatives": {
                                "type": "array",
                                "minItems": 1,
                                "prefixItems": [{
                                    "type": "object",
                                    "required": ["words"],
                                    "properties": {
                                        "words": {"type": "array"},
                                    },
                                }],
                            },
                        },
                    }],
                },
            },
        },
    },
}

_EXPECTED_PATH = (
    "Unsupported ASR JSON structure. Expected "
    "results.channels[0].alternatives[0].words to be an array."
)


def parse_asr_json(data: Any) -> WordSequence:
    """Convert a decoded ASR response into interpolated Words.

    Args:
        data: The decoded JSON document.

    Returns:
        Words in input order, every one timed.

    Raises:
        UnsupportedFormatError: If the words array cannot be found.
    """
    try:
        jsonschema.validate(instance=data, schema=ASR_ENVELOPE_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise UnsupportedFormatError("{} ({})".format(_EXPECTED_PATH, exc.message)) from exc

    entries = data["results"]["channels"][0]["alternatives"][0]["words"]

    words: WordSequence = []
    for index, item in enumerate(entries, start=1):
        if not isinstance(item, dict):
            raise UnsupportedFormatError(
                "ASR word entry {} is not an object: {!r}".format(index, item)
            )
        speaker = item.get("speaker")
        start, end = timing_pair(item.get("start"), item.get("end"))
        words.append(Word(
            number=index,
            text=first_text(item, "punctuated_word", "word"),
            start=start,
            end=end,
            speaker=str(speaker) if speaker is not None else None,
        ))

    return interpolate_timestamps(words)
