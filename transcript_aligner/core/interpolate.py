"""Estimation of missing word timestamps from timed neighbours.

WHY: Every matcher leaves some words untimed — words the aligner dropped,
words a user typed in, words the ASR never heard. Editors and caption
formats need a time on every word, so gaps are filled from the nearest
timed words around them.

HOW: A left-to-right scan finds each untimed word, locates the nearest
timed word before it (prev) and after it (next), and fills the whole gap
in one go according to which anchors exist. After a bounded gap the scan
jumps to next.

RULES:
- A word is untimed when start is None
- prev anchor time is prev.end, or prev.start when end is unknown
- Both anchors, time advancing: gap time split into (gap_words + 1) equal
  slices, words chained start = previous end, end = start + slice
- Both anchors, time not advancing: every gap word gets start = end = anchor
- Only prev: start = anchor, end = start + 0.5
- Only next: walk backward from next.start in 0.5s steps, clamped at 0
- No anchor at all: first word gets 0.0 - 0.5, later words chain from it
- Fully timed input is returned unchanged (idempotent)
"""

from __future__ import annotations

import logging
from typing import Optional

from transcript_aligner.core.ir import Word, WordSequence

logger = logging.getLogger(__name__)

DEFAULT_WORD_DURATION_S = 0.5


def _anchor_time(word: Word) -> float:
    return word.end if word.end is not None else word.start


def _find_prev_timed(words: WordSequence, index: int) -> Optional[int]:
    for j in range(index - 1, -1, -1):
        if words[j].start is not None:
            return j
    return None


def _find_next_timed(words: WordSequence, index: int) -> Optional[int]:
    for j in range(index + 1, len(words)):
        if words[j].start is not None:
            return j
    return None


def interpolate_timestamps(words: WordSequence) -> WordSequence:
    """Fill every unknown start/end in *words* from neighbouring timestamps.

    Args:
        words: Sequence where some words may have start=None.

    Returns:
        New list in which every word has a start.
    """
    filled = list(words)
    count = len(filled)
    gaps = 0
    i = 0

    while i < count:
        if filled[i].start is not None:
            i += 1
            continue

        gaps += 1
        prev_index = _find_prev_timed(filled, i)
        next_index = _find_next_timed(filled, i)

        if prev_index is not None and next_index is not None:
            cursor = _anchor_time(filled[prev_index])
            time_diff = filled[next_index].start - cursor
            gap_words = next_index - prev_index - 1

            if time_diff > 0:
                per_word = time_diff / (gap_words + 1)
                for k in range(prev_index + 1, next_index):
                    filled[k] = filled[k].with_timing(cursor, cursor + per_word)
                    cursor = cursor + per_word
            else:
                # Clock did not advance: zero-duration placement
                for k in range(prev_index + 1, next_index):
                    filled[k] = filled[k].with_timing(cursor, cursor)
            i = next_index

        elif prev_index is not None:
            start = _anchor_time(filled[prev_index])
            filled[i] = filled[i].with_timing(start, start + DEFAULT_WORD_DURATION_S)
            i += 1

        elif next_index is not None:
            cursor = filled[next_index].start
            for k in range(next_index - 1, i - 1, -1):
                start = max(0.0, cursor - DEFAULT_WORD_DURATION_S)
                filled[k] = filled[k].with_timing(start, cursor)
                cursor = start
            i = next_index

        else:
            filled[i] = filled[i].with_timing(0.0, DEFAULT_WORD_DURATION_S)
            i += 1

    if gaps:
        logger.debug("Interpolated %d gap(s) across %d words", gaps, count)
    return filled
