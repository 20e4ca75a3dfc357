"""Formatter interface and the output container it returns.

WHY: The CLI runs every selected formatter over the same reconciled words
and saves whatever comes back. It should not need to know which format it
is running, only the suffix to save under.

HOW: BaseFormatter declares ``name`` and ``format()``. FormatterOutput
carries one text file: its suffix, content and MIME type.

RULES:
- ``format()`` returns a list; both current formatters return one item
- ``suffix`` starts with a hyphen and the CLI prepends the transcript stem
- Content is always text, written as UTF-8
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from transcript_aligner.core.ir import WordSequence


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-words.json"`` → ``"interview-words.json"``.
        content: The file text.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Base class for output formatters; register subclasses in FORMATTERS."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Words JSON'."""

    @abstractmethod
    def format(self, words: WordSequence) -> list[FormatterOutput]:
        """Convert the reconciled words into one or more output files."""
