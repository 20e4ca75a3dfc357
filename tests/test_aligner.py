"""Unit tests for the global sequence aligner.

WHY: The aligner decides which machine word lends its timestamp to each
transcript word after edits. Its scores and tie-breaks must be exact or
the same input produces different timings from run to run and tool to tool.

HOW: Tests check the alignment path on small hand-computed score matrices
(match, insertion, deletion, substitution, both tie-breaks), the timing
transfer rules, and the length invariant.

RULES:
- Expected paths were worked out by hand with MATCH=5, MISMATCH=-3, GAP=-4.
"""

import pytest

from transcript_aligner.core.aligner import (
    DIAG,
    GAP_PENALTY,
    LEFT,
    MATCH_SCORE,
    MISMATCH_PENALTY,
    UP,
    AlignmentStep,
    align_and_apply_timestamps,
    alignment_cells,
    compute_alignment,
)
from transcript_aligner.core.ir import Word


class TestScoringConstants:

    def test_values(self):
        assert (MATCH_SCORE, MISMATCH_PENALTY, GAP_PENALTY) == (5, -3, -4)

    def test_substitution_cheaper_than_two_gaps(self):
        assert 2 * GAP_PENALTY < MISMATCH_PENALTY


class TestComputeAlignment:

    def test_identical_is_all_diagonal(self):
        steps = compute_alignment(["a", "b", "c"], ["a", "b", "c"])
        assert steps == [AlignmentStep(DIAG, i, i) for i in range(3)]

    def test_extra_target_word_is_left_step(self):
        steps = compute_alignment(["cat", "sat"], ["cat", "mat", "sat"])
        assert steps == [
            AlignmentStep(DIAG, 0, 0),
            AlignmentStep(LEFT, None, 1),
            AlignmentStep(DIAG, 1, 2),
        ]

    def test_extra_source_word_is_up_step(self):
        steps = compute_alignment(["a", "extra", "b"], ["a", "b"])
        assert steps == [
            AlignmentStep(DIAG, 0, 0),
            AlignmentStep(UP, 1, None),
            AlignmentStep(DIAG, 2, 1),
        ]

    def test_diagonal_beats_left_on_tie(self):
        # dp[1][2]: diag -7 ties left -7, diagonal kept
        steps = compute_alignment(["x"], ["y", "z"])
        assert steps == [AlignmentStep(LEFT, None, 0), AlignmentStep(DIAG, 0, 1)]

    def test_diagonal_beats_up_on_tie(self):
        # dp[2][1]: diag -7 ties up -7, diagonal kept
        steps = compute_alignment(["y", "z"], ["x"])
        assert steps == [AlignmentStep(UP, 0, None), AlignmentStep(DIAG, 1, 0)]

    def test_empty_target_is_all_up(self):
        steps = compute_alignment(["a", "b"], [])
        assert steps == [AlignmentStep(UP, 0, None), AlignmentStep(UP, 1, None)]

    def test_empty_source_is_all_left(self):
        steps = compute_alignment([], ["a", "b"])
        assert steps == [AlignmentStep(LEFT, None, 0), AlignmentStep(LEFT, None, 1)]

    def test_both_empty(self):
        assert compute_alignment([], []) == []

    @pytest.mark.parametrize("source,target", [
        (["a"], ["b", "c", "d", "e"]),
        (["a", "b", "c", "d"], ["e"]),
        (["q", "r"], ["r", "q", "s"]),
        (["one", "two", "three"], ["zero", "three", "four", "five", "one"]),
    ])
    def test_path_consumes_each_index_once(self, source, target):
        steps = compute_alignment(source, target)
        source_indexes = [s.source_index for s in steps if s.source_index is not None]
        target_indexes = [s.target_index for s in steps if s.target_index is not None]
        assert source_indexes == list(range(len(source)))
        assert target_indexes == list(range(len(target)))

    def test_alignment_cells(self):
        assert alignment_cells(0, 0) == 1
        assert alignment_cells(3, 4) == 20


class TestAlignAndApplyTimestamps:

    def test_quick_brown_fox(self, fox_transcript, fox_timed):
        result = align_and_apply_timestamps(fox_transcript, fox_timed)
        assert [(w.start, w.end) for w in result] == [
            (0.0, 0.2), (0.2, 0.5), (0.5, 0.8), (0.8, 1.0),
        ]
        assert [w.text for w in result] == ["The", "quick", "brown", "fox"]

    def test_cat_sat_skips_extra_target_word(self, make_words):
        transcript = make_words(["cat", "sat"])
        timed = make_words(["cat", "mat", "sat"], [(0.0, 0.5), (0.5, 1.0), (1.0, 1.5)])
        result = align_and_apply_timestamps(transcript, timed)
        assert [(w.start, w.end) for w in result] == [(0.0, 0.5), (1.0, 1.5)]

    def test_deleted_word_becomes_untimed(self, make_words):
        source = make_words(["a", "extra", "b"], [(9.0, 9.5)] * 3)
        target = make_words(["a", "b"], [(0.0, 0.5), (0.5, 1.0)])
        result = align_and_apply_timestamps(source, target)
        assert (result[0].start, result[0].end) == (0.0, 0.5)
        assert (result[1].start, result[1].end) == (None, None)
        assert (result[2].start, result[2].end) == (0.5, 1.0)

    def test_substitution_transfers_time(self, make_words):
        source = make_words(["hello", "world"])
        target = make_words(["hallo", "world"], [(1.0, 1.25), (1.25, 1.75)])
        result = align_and_apply_timestamps(source, target)
        assert result[0].text == "hello"
        assert (result[0].start, result[0].end) == (1.0, 1.25)

    def test_disjoint_words_of_equal_length_substitute(self, make_words):
        """With no shared words, equal-length sequences still pair up diagonally."""
        source = make_words(["one", "two"])
        target = make_words(["three", "four"], [(0.0, 1.0), (1.0, 2.0)])
        result = align_and_apply_timestamps(source, target)
        assert [w.start for w in result] == [0.0, 1.0]

    def test_empty_target_leaves_everything_untimed(self, make_words):
        source = make_words(["a", "b"], [(0.0, 1.0), (1.0, 2.0)])
        result = align_and_apply_timestamps(source, [])
        assert all(w.start is None and w.end is None for w in result)

    def test_matching_uses_normalized_text(self, make_words):
        source = make_words(["Sheriff's", "CAR."])
        target = make_words(["sheriffs", "car"], [(0.0, 0.5), (0.5, 1.0)])
        steps = compute_alignment([w.normalized for w in source], [w.normalized for w in target])
        assert [s.op for s in steps] == [DIAG, DIAG]
        result = align_and_apply_timestamps(source, target)
        assert result[1].start == 0.5

    def test_exact_match_only_no_plural_tolerance(self):
        # "cats" vs "cat" is a substitution, not a match: with a gap option
        # available, the matching word wins the diagonal instead.
        steps = compute_alignment(["cat"], ["cats", "cat"])
        assert steps == [AlignmentStep(LEFT, None, 0), AlignmentStep(DIAG, 0, 1)]

    @pytest.mark.parametrize("source_texts,target_texts", [
        ([], []),
        (["a"], []),
        ([], ["a"]),
        (["a", "b", "c"], ["c", "b", "a"]),
        (["the", "the", "the"], ["the"]),
        (["x"], ["a", "b", "c", "d", "e"]),
    ])
    def test_output_length_equals_source(self, make_words, source_texts, target_texts):
        source = make_words(source_texts)
        target = make_words(target_texts, [(float(i), float(i) + 1) for i in range(len(target_texts))])
        assert len(align_and_apply_timestamps(source, target)) == len(source)

    def test_metadata_preserved(self):
        source = [Word(number=3, text="hi", speaker="S2", is_paragraph_start=True)]
        target = [Word(number=1, text="hi", start=4.0, end=4.5)]
        result = align_and_apply_timestamps(source, target)
        assert result[0] == Word(number=3, text="hi", start=4.0, end=4.5,
                                 speaker="S2", is_paragraph_start=True)

    def test_inputs_not_modified(self, make_words):
        source = make_words(["a", "extra"], [(5.0, 6.0), (6.0, 7.0)])
        target = make_words(["a"], [(0.0, 1.0)])
        align_and_apply_timestamps(source, target)
        assert [(w.start, w.end) for w in source] == [(5.0, 6.0), (6.0, 7.0)]
