"""High-level reconciliation: matching followed by gap filling.

WHY: Callers rarely want a matcher on its own. Applying aligner or ASR
timing to a transcript always ends with interpolation so that every word
is timed, and a hand-edited transcript needs the same gap filling after
words were added or removed. These compositions live here so the CLI and
any other caller run them identically.

HOW: apply_timestamps() picks the global aligner or the windowed matcher,
then interpolates and renumbers. interpolate_edits() renumbers and
interpolates an existing transcript.

RULES:
- method "align" uses align_and_apply_timestamps (default)
- method "windowed" uses match_windowed with the given lookahead
- Any other method raises ValueError
- Output numbers are always 1..n
"""

from __future__ import annotations

import logging

from transcript_aligner.core.aligner import align_and_apply_timestamps
from transcript_aligner.core.interpolate import interpolate_timestamps
from transcript_aligner.core.ir import WordSequence, renumber
from transcript_aligner.core.matcher import DEFAULT_LOOKAHEAD, match_windowed

logger = logging.getLogger(__name__)

METHODS = ("align", "windowed")


def timing_coverage(words: WordSequence) -> float:
    """Fraction of words with a known start time (0.0 for no words)."""
    if not words:
        return 0.0
    timed = sum(1 for w in words if w.start is not None)
    return timed / len(words)


def apply_timestamps(
    transcript: WordSequence,
    timed: WordSequence,
    method: str = "align",
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> WordSequence:
    """Transfer timing from *timed* onto *transcript* and fill the gaps.

    Args:
        transcript: Words whose text is kept.
        timed: Words from an aligner or ASR system carrying timestamps.
        method: "align" for global alignment, "windowed" for the
                forward-cursor matcher.
        lookahead: Window size for the windowed matcher.

    Returns:
        New, renumbered list of transcript words, all timed.

    Raises:
        ValueError: If method is not one of METHODS.
    """
    if method == "align":
        matched = align_and_apply_timestamps(transcript, timed)
    elif method == "windowed":
        matched = match_windowed(transcript, timed, lookahead=lookahead)
    else:
        raise ValueError(
            "Unknown method '{}'. Available methods: {}".format(method, ", ".join(METHODS))
        )

    matched_count = sum(1 for w in matched if w.start is not None)
    logger.info(
        "Applied timestamps (%s): %d matched, %d unmatched of %d words",
        method, matched_count, len(matched) - matched_count, len(matched),
    )
    return renumber(interpolate_timestamps(matched))


def interpolate_edits(words: WordSequence) -> WordSequence:
    """Renumber an edited transcript and fill its untimed words."""
    untimed = sum(1 for w in words if w.start is None)
    result = interpolate_timestamps(renumber(words))
    logger.info("Interpolated edits: %d of %d words filled", untimed, len(words))
    return result
