"""Adapter modules for converting external documents into Word lists.

WHY: Aligners, ASR services and people all hand over transcripts in
different shapes. Adapters turn each shape into the engine's Word list so
the engine never sees third-party structure.

HOW: One module per source format, each exposing a parse_* function that
takes an already-decoded document (JSON value or text string).

RULES:
- Adapters are pure data transformations — no I/O, no side effects.
- Unrecognised structure fails fast with UnsupportedFormatError.
- Timed sources (alignment, ASR) come back interpolated; transcripts do not.
"""

from transcript_aligner.adapters.alignment_json import parse_alignment_json
from transcript_aligner.adapters.asr_json import parse_asr_json
from transcript_aligner.adapters.errors import UnsupportedFormatError
from transcript_aligner.adapters.plain_text import parse_plain_text
from transcript_aligner.adapters.words_json import parse_words_json

__all__ = [
    "UnsupportedFormatError",
    "parse_alignment_json",
    "parse_asr_json",
    "parse_plain_text",
    "parse_words_json",
]
