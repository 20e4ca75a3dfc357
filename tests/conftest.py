"""Shared test fixtures for the transcript_aligner test suite.

WHY: Most engine tests need small word sequences with a known mix of
timed and untimed words. Centralizing the builders here keeps each test
focused on the behaviour it checks.

HOW: make_words builds Word lists from texts and (start, end) pairs.
The fox fixtures are the canonical four-word scenario: an untimed
transcript and an aligner output with the same words.

RULES:
- Times are chosen to be exact in binary floating point where possible.
- Fixtures return fresh lists on every call.
"""

from typing import List, Optional, Sequence, Tuple

import pytest

from transcript_aligner.core.ir import Word

FOX_TEXTS = ["The", "quick", "brown", "fox"]
FOX_TIMES = [(0.0, 0.2), (0.2, 0.5), (0.5, 0.8), (0.8, 1.0)]


def build_words(
    texts: Sequence[str],
    times: Optional[Sequence[Optional[Tuple[float, float]]]] = None,
) -> List[Word]:
    words = []
    for index, text in enumerate(texts, start=1):
        span = times[index - 1] if times is not None else None
        start, end = span if span is not None else (None, None)
        words.append(Word(number=index, text=text, start=start, end=end))
    return words


@pytest.fixture
def make_words():
    """Factory: make_words(texts, times=None) -> List[Word]."""
    return build_words


@pytest.fixture
def fox_transcript():
    """Untimed transcript: The quick brown fox."""
    return build_words(FOX_TEXTS)


@pytest.fixture
def fox_timed():
    """Aligner output for the same four words."""
    return build_words(FOX_TEXTS, FOX_TIMES)
