"""Discovery and loading of transcript and timing source files.

WHY: Users keep the aligner and ASR exports for a transcript next to it,
named after it (interview.txt, interview-alignment.json, interview-asr.json).
Finding those automatically saves typing every path on the command line.

HOW: resolve_companion_files() looks for the naming convention next to the
transcript. load_json() and load_text() read the files; parsing into words
is left to the adapters.

RULES:
- Companion files: {stem}-alignment.json and {stem}-asr.json next to the transcript
- The stem is derived by stripping all extensions from the filename
- Missing companions are not an error (the path is None)
- Files are read as UTF-8; missing files raise FileNotFoundError
- Malformed JSON raises json.JSONDecodeError from load_json
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass
class SourceFiles:
    """Resolved paths to optional companion timing files."""

    alignment_path: Optional[Path] = None
    asr_path: Optional[Path] = None


def file_stem(path: str | Path) -> str:
    """Filename with every extension removed ("talk.v2.txt" -> "talk")."""
    stem = Path(path).name
    while "." in stem:
        stem = stem.rsplit(".", 1)[0]
    return stem


def resolve_companion_files(transcript_path: str | Path) -> SourceFiles:
    """Discover companion timing files next to the transcript.

    Args:
        transcript_path: Path to the transcript file.

    Returns:
        SourceFiles with resolved paths (None for files not found).
    """
    transcript = Path(transcript_path)
    directory = transcript.parent
    stem = file_stem(transcript)

    result = SourceFiles()

    alignment_path = directory / f"{stem}-alignment.json"
    if alignment_path.is_file():
        result.alignment_path = alignment_path

    asr_path = directory / f"{stem}-asr.json"
    if asr_path.is_file():
        result.asr_path = asr_path

    return result


def load_text(path: str | Path) -> str:
    """Read a UTF-8 text file."""
    return Path(path).read_text(encoding="utf-8")


def load_json(path: str | Path) -> Any:
    """Read and decode a UTF-8 JSON file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
