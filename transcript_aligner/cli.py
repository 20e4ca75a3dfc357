"""Command-line interface for the Transcript Aligner.

WHY: Users need a simple way to put aligner or ASR timing onto a
transcript from the terminal. The CLI wires together the full pipeline —
source loading, format adapters, the reconciliation engine, pluggable
formatter output, and file saving — behind a single command.

HOW: Uses argparse to accept a transcript file, an optional timing source
(--alignment or --asr, or auto-discovered companion files), the matching
method, output format selection, and output directory. Status messages go
to stderr; output files are saved next to the transcript (or to
--output-dir).

RULES:
- Positional argument: transcript file (.json = words JSON, anything else = plain text)
- Timing source: --alignment or --asr; otherwise companion files
  {stem}-alignment.json / {stem}-asr.json are discovered (alignment wins)
- No timing source, or --interpolate-only: the transcript is re-timed by
  interpolation alone
- The global aligner is refused when its matrix would exceed MAX_ALIGNMENT_CELLS
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-words-2.json)
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import jsonschema

from transcript_aligner.adapters import (
    parse_alignment_json,
    parse_asr_json,
    parse_plain_text,
    parse_words_json,
)
from transcript_aligner.config import (
    DEFAULT_LOOKAHEAD,
    DEFAULT_METHOD,
    LOG_LEVEL,
    MAX_ALIGNMENT_CELLS,
)
from transcript_aligner.core.aligner import alignment_cells
from transcript_aligner.core.ir import WordSequence
from transcript_aligner.core.reconcile import (
    METHODS,
    apply_timestamps,
    interpolate_edits,
    timing_coverage,
)
from transcript_aligner.core.sources import (
    file_stem,
    load_json,
    load_text,
    resolve_companion_files,
)
from transcript_aligner.formatters import FORMATTERS
from transcript_aligner.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


class AlignmentTooLargeError(ValueError):
    """The global aligner's score matrix would exceed the configured limit."""


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the aligner several times on the same transcript.
    Overwriting previous output would lose work.

    RULES:
    - First attempt: {stem}{suffix} (e.g. interview-words.json)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. interview-words-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to a conflict-free path and return it."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def load_transcript(path: Path) -> WordSequence:
    """Load a transcript file: words JSON for .json, plain text otherwise."""
    if path.suffix.lower() == ".json":
        return parse_words_json(load_json(path))
    return parse_plain_text(load_text(path))


def _load_timing_source(
    transcript_path: Path,
    alignment_path: Optional[str],
    asr_path: Optional[str],
) -> Tuple[Optional[WordSequence], Optional[str]]:
    """Load the timed word sequence to reconcile against.

    RULES:
    - Explicit --alignment / --asr win over companion discovery
    - Companion {stem}-alignment.json wins over {stem}-asr.json
    - Returns (None, None) when no source is available

    Returns:
        Tuple of (timed words, description of where they came from).
    """
    if alignment_path:
        return parse_alignment_json(load_json(alignment_path)), "{} (alignment)".format(alignment_path)
    if asr_path:
        return parse_asr_json(load_json(asr_path)), "{} (ASR)".format(asr_path)

    companion = resolve_companion_files(transcript_path)
    if companion.alignment_path:
        words = parse_alignment_json(load_json(companion.alignment_path))
        return words, "{} (alignment, auto-discovered)".format(companion.alignment_path.name)
    if companion.asr_path:
        words = parse_asr_json(load_json(companion.asr_path))
        return words, "{} (ASR, auto-discovered)".format(companion.asr_path.name)

    return None, None


def check_alignment_size(n: int, m: int, limit: int = MAX_ALIGNMENT_CELLS) -> None:
    """Refuse a global alignment whose score matrix exceeds *limit* cells.

    Raises:
        AlignmentTooLargeError: If (n+1)*(m+1) > limit.
    """
    cells = alignment_cells(n, m)
    if cells > limit:
        raise AlignmentTooLargeError(
            "Alignment of {} x {} words needs {:,} cells, above the limit of {:,}. "
            "Use --method windowed or raise TRANSCRIPT_ALIGNER_MAX_CELLS.".format(
                n, m, cells, limit,
            )
        )


def _run_pipeline(args: argparse.Namespace) -> None:
    """Execute load → reconcile → format → save for one transcript.

    RULES:
    - Validate paths and formats before loading anything
    - Status messages to stderr at each step
    - ValueError / OSError (bad files, unsupported JSON, size limit) exit 1
    - Schema failures in formatter output exit 1
    - All formatters run before any file is saved
    """
    input_path = Path(args.transcript).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    if args.formats:
        format_keys = [f.strip() for f in args.formats.split(",")]
        for key in format_keys:
            if key not in FORMATTERS:
                available = ", ".join(sorted(FORMATTERS.keys()))
                _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    else:
        format_keys = list(FORMATTERS.keys())

    try:
        _status("Loading transcript...")
        transcript = load_transcript(input_path)
        _status("  {} words from {}".format(len(transcript), input_path.name))

        timed: Optional[WordSequence] = None
        if not args.interpolate_only:
            timed, source = _load_timing_source(input_path, args.alignment, args.asr)
            if timed is not None:
                _status("  Timing source: {} ({} words)".format(source, len(timed)))

        if timed is None:
            _status("Interpolating transcript timing...")
            words = interpolate_edits(transcript)
        else:
            if args.method == "align":
                check_alignment_size(len(transcript), len(timed))
            _status("Applying timestamps ({})...".format(args.method))
            matched_before = timing_coverage(transcript)
            words = apply_timestamps(
                transcript, timed, method=args.method, lookahead=args.lookahead,
            )
            logger.debug("Coverage before reconcile: %.1f%%", matched_before * 100)

        _status("  {:.0%} of {} words timed".format(timing_coverage(words), len(words)))

        _status("Formatting output...")
        outputs: List[FormatterOutput] = []
        for key in format_keys:
            formatter = FORMATTERS[key]()
            _status("  Running {} formatter...".format(formatter.name))
            outputs.extend(formatter.format(words))

        # Nothing is written until every formatter has succeeded.
        stem = file_stem(input_path)
        saved_files: List[Path] = []
        for output in outputs:
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    except jsonschema.ValidationError as e:
        _fail("Output failed schema validation: {}".format(e.message))
    except (ValueError, OSError) as e:
        _fail(str(e))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: transcript (required)
    - Timing source: --alignment or --asr (mutually exclusive)
    - Optional: --method, --lookahead, --interpolate-only
    - Optional: --formats (comma-separated), --output-dir, --verbose
    """
    parser = argparse.ArgumentParser(
        prog="transcript_aligner",
        description="Attach word-level timestamps from a forced aligner or ASR "
                    "output to a transcript, filling any gaps by interpolation.",
    )

    parser.add_argument(
        "transcript",
        help="Transcript file: plain text, or words JSON written by this tool.",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--alignment",
        default=None,
        help="Forced-aligner JSON (word array, {words: [...]}, or TextGrid JSON).",
    )
    source.add_argument(
        "--asr",
        default=None,
        help="ASR result JSON (results.channels[0].alternatives[0].words).",
    )

    parser.add_argument(
        "--method",
        choices=METHODS,
        default=DEFAULT_METHOD,
        help="Matching method: global alignment or windowed cursor (default: %(default)s).",
    )

    parser.add_argument(
        "--lookahead",
        type=int,
        default=DEFAULT_LOOKAHEAD,
        help="Window size for --method windowed (default: %(default)s).",
    )

    parser.add_argument(
        "--interpolate-only",
        action="store_true",
        help="Ignore timing sources and only fill untimed words by interpolation.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as transcript).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # getLevelName maps known names to ints and anything else to a string
    log_level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(log_level, int):
        parser.error(
            "TRANSCRIPT_ALIGNER_LOG_LEVEL must be a logging level name, got {!r}".format(LOG_LEVEL)
        )

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.lookahead < 1:
        parser.error("--lookahead must be at least 1")

    _run_pipeline(args)


if __name__ == "__main__":
    main()
