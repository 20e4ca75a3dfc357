"""Windowed local matching of transcript words against timed words.

WHY: Forced-aligner output follows the transcript almost word for word;
only a few tokens drift (plurals, possessives, dropped fillers). For that
case a full global alignment is unnecessary. A forward cursor with a small
lookahead window attaches times in linear time.

HOW: A single cursor walks the timed sequence. For each transcript word
the window timed[cursor : cursor + lookahead] is searched for the first
entry whose normalized text fuzzy-matches. A hit copies its timing and
moves the cursor just past it. A miss emits the word untimed and leaves
the cursor where it was.

RULES:
- Output has exactly one word per transcript word, in order
- The cursor starts at the first timed entry with non-empty text
- Timed entries with empty text are skipped inside the window
- The cursor never moves backward and does NOT advance on a miss
  (sustained misses can leave it stalled behind the transcript)
- Only timing is copied; text, number, speaker and paragraph flag
  come from the transcript word
"""

from __future__ import annotations

import logging

from transcript_aligner.core.ir import WordSequence
from transcript_aligner.core.normalize import normalize_token, tokens_match

logger = logging.getLogger(__name__)

DEFAULT_LOOKAHEAD = 6


def match_windowed(
    transcript: WordSequence,
    timed: WordSequence,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> WordSequence:
    """Attach timing from *timed* to *transcript* using a forward window.

    Args:
        transcript: Words to receive timestamps.
        timed: Words carrying timestamps, assumed to be in transcript order.
        lookahead: Number of timed entries examined per transcript word.

    Returns:
        New list, same length as *transcript*, with start/end copied from
        the matched timed word or set to None.

    Raises:
        ValueError: If lookahead is less than 1.
    """
    if lookahead < 1:
        raise ValueError("lookahead must be at least 1, got {}".format(lookahead))

    timed_count = len(timed)
    cursor = 0
    while cursor < timed_count and not timed[cursor].text:
        cursor += 1

    # Normalized forms of the timed words, computed once
    timed_keys = [normalize_token(w.text) if w.text else None for w in timed]

    matched: WordSequence = []
    hits = 0

    for word in transcript:
        key = normalize_token(word.text)
        found = None
        window_end = min(cursor + lookahead, timed_count)

        for j in range(cursor, window_end):
            timed_key = timed_keys[j]
            if timed_key is None:
                continue
            if tokens_match(key, timed_key):
                found = j
                break

        if found is not None:
            source = timed[found]
            matched.append(word.with_timing(source.start, source.end))
            cursor = found + 1
            hits += 1
        else:
            matched.append(word.with_timing(None, None))

    logger.debug(
        "Windowed match: %d/%d transcript words timed (lookahead=%d)",
        hits, len(transcript), lookahead,
    )
    return matched
