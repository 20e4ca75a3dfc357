"""Global sequence alignment of two word sequences.

WHY: A hand-edited transcript and a fresh machine transcription of the
same audio diverge in ways a forward cursor cannot follow: words are
inserted, deleted, and replaced. Timestamps can still be carried across
if the two sequences are aligned as a whole.

HOW: Needleman-Wunsch dynamic programming over the normalized word keys.
A (n+1) x (m+1) score matrix is filled together with a traceback matrix;
walking the traceback from the bottom-right corner yields one step per
consumed word. Diagonal steps transfer the target word's timing to the
source word, whether the keys matched or were substituted.

RULES:
- Keys compare by exact equality of normalize_token() output
- MATCH_SCORE = 5, MISMATCH_PENALTY = -3, GAP_PENALTY = -4
  (one substitution costs less than two gaps)
- Ties prefer DIAG over UP over LEFT: UP wins only if strictly better than
  DIAG, LEFT only if strictly better than the best so far
- DIAG: source word takes target start/end
- UP: source word gets start = end = None
- LEFT: target word is skipped, nothing is emitted
- Output length always equals len(source)
- O(n*m) time and memory; callers bound the input size (alignment_cells)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from transcript_aligner.core.ir import WordSequence

logger = logging.getLogger(__name__)

MATCH_SCORE = 5
MISMATCH_PENALTY = -3
GAP_PENALTY = -4

# Traceback directions.
DIAG = "diag"
UP = "up"
LEFT = "left"


@dataclass(frozen=True)
class AlignmentStep:
    """One step of an alignment path.

    op is DIAG, UP or LEFT. source_index is None for LEFT steps and
    target_index is None for UP steps.
    """

    op: str
    source_index: Optional[int]
    target_index: Optional[int]


def alignment_cells(n: int, m: int) -> int:
    """Number of cells in the score matrix for inputs of length n and m."""
    return (n + 1) * (m + 1)


def compute_alignment(
    source_keys: Sequence[str],
    target_keys: Sequence[str],
) -> List[AlignmentStep]:
    """Compute the optimal global alignment of two key sequences.

    Args:
        source_keys: Comparison keys of the source words.
        target_keys: Comparison keys of the target words.

    Returns:
        Alignment steps ordered from the start of both sequences.
    """
    n = len(source_keys)
    m = len(target_keys)

    dp = [[0] * (m + 1) for _ in range(n + 1)]
    traceback = [[""] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = dp[i - 1][0] + GAP_PENALTY
        traceback[i][0] = UP
    for j in range(1, m + 1):
        dp[0][j] = dp[0][j - 1] + GAP_PENALTY
        traceback[0][j] = LEFT

    for i in range(1, n + 1):
        source_key = source_keys[i - 1]
        row = dp[i]
        prev_row = dp[i - 1]
        trace_row = traceback[i]
        for j in range(1, m + 1):
            if source_key == target_keys[j - 1]:
                pair_score = MATCH_SCORE
            else:
                pair_score = MISMATCH_PENALTY

            best = prev_row[j - 1] + pair_score
            direction = DIAG

            delete_score = prev_row[j] + GAP_PENALTY
            if delete_score > best:
                best = delete_score
                direction = UP

            insert_score = row[j - 1] + GAP_PENALTY
            if insert_score > best:
                best = insert_score
                direction = LEFT

            row[j] = best
            trace_row[j] = direction

    steps: List[AlignmentStep] = []
    i, j = n, m
    # Column 0 is all UP and row 0 all LEFT, so every move stays in bounds.
    while i > 0 or j > 0:
        direction = traceback[i][j]
        if direction == DIAG:
            steps.append(AlignmentStep(DIAG, i - 1, j - 1))
            i -= 1
            j -= 1
        elif direction == UP:
            steps.append(AlignmentStep(UP, i - 1, None))
            i -= 1
        else:
            steps.append(AlignmentStep(LEFT, None, j - 1))
            j -= 1

    steps.reverse()
    logger.debug(
        "Aligned %d source x %d target words (score %d, %d cells)",
        n, m, dp[n][m], alignment_cells(n, m),
    )
    return steps


def align_and_apply_timestamps(
    source: WordSequence,
    target: WordSequence,
) -> WordSequence:
    """Transfer timestamps from *target* onto *source* via global alignment.

    WHY: The source (e.g. a pasted or edited transcript) holds the text the
    user wants to keep; the target (e.g. ASR output) holds accurate times.

    HOW: Aligns the normalized keys of both sequences, then rebuilds the
    source words with timing taken from their diagonal partners.

    RULES:
    - Source words aligned diagonally take their partner's start/end
    - Source words on an UP step become untimed
    - Returned list has len(source) words; inputs are not modified

    Args:
        source: Words whose text is kept.
        target: Words whose timestamps are transferred.

    Returns:
        New list of source words with updated timing.
    """
    steps = compute_alignment(
        [w.normalized for w in source],
        [w.normalized for w in target],
    )

    aligned = list(source)
    for step in steps:
        if step.op == DIAG:
            partner = target[step.target_index]
            aligned[step.source_index] = aligned[step.source_index].with_timing(
                partner.start, partner.end,
            )
        elif step.op == UP:
            aligned[step.source_index] = aligned[step.source_index].with_timing(None, None)

    return aligned
