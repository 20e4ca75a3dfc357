"""Intermediate representation for transcript words.

WHY: Transcripts reach the engine from several places — pasted text, a
forced aligner, an ASR service, or the engine's own earlier output. Every
matcher, the interpolator and all formatters need one shared word shape so
none of them depends on where the words came from.

HOW: A single frozen dataclass, Word, carries display text, optional
timing, and pass-through metadata. A WordSequence is simply an ordered
list of Words. Engine functions build new lists with dataclasses.replace()
rather than mutating what they were given.

RULES:
- Word is the atomic unit — every engine stage and formatter works with these
- start / end are float seconds, or None when unknown
- When both are known, start <= end
- normalized text is derived from text on demand, never stored
- speaker and is_paragraph_start are carried through untouched
- number is 1-based and reassigned on output (see renumber)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from transcript_aligner.core.normalize import normalize_token


@dataclass(frozen=True)
class Word:
    """A single transcript word with optional timing.

    RULES:
    - text: display form, may carry punctuation and case
    - start / end: seconds, None when unknown
    - speaker: opaque label ("S1", "SPEAKER_00", ...) or None
    - is_paragraph_start: True on the first word of a paragraph
    """

    number: int
    text: str
    start: Optional[float] = None
    end: Optional[float] = None
    speaker: Optional[str] = None
    is_paragraph_start: bool = False

    @property
    def normalized(self) -> str:
        """Comparison form of the text (see normalize_token)."""
        return normalize_token(self.text)

    @property
    def has_timing(self) -> bool:
        return self.start is not None

    def with_timing(self, start: Optional[float], end: Optional[float]) -> "Word":
        """Return a copy of this word carrying the given timing."""
        return replace(self, start=start, end=end)


WordSequence = List[Word]


def renumber(words: WordSequence) -> WordSequence:
    """Return a copy of *words* with numbers reassigned 1..n."""
    return [
        w if w.number == index else replace(w, number=index)
        for index, w in enumerate(words, start=1)
    ]
