"""Plain text transcript export with paragraph timestamps and speakers.

WHY: Editors hand finished transcripts to people who read, not parse.
A paragraph per block, prefixed with where it starts in the audio and who
is speaking, is the form they expect — and the same form is pasted back
in later, so it must stay simple.

HOW: Walk the words; a word with is_paragraph_start opens a new
paragraph. Each paragraph becomes one line: the first word's start
formatted with format_timestamp, the first word's speaker label, then the
words joined with single spaces.

RULES:
- Line format: "[HH:MM:SS.d ][Speaker: ]word word word"
- Timestamp only if the paragraph's first word is timed
- Speaker only if the paragraph's first word has a label
- Words before the first paragraph start form the first paragraph
- Paragraphs separated by a blank line; output ends with one newline
- Empty input gives empty content
- Output suffix: "-transcript.txt"; media type "text/plain"
"""

from __future__ import annotations

from typing import List

from transcript_aligner.core.ir import Word, WordSequence
from transcript_aligner.core.timecode import format_timestamp
from transcript_aligner.formatters.base import BaseFormatter, FormatterOutput


def _paragraph_line(words: List[Word]) -> str:
    first = words[0]
    line = ""
    if first.start is not None:
        line += "{} ".format(format_timestamp(first.start))
    if first.speaker:
        line += "{}: ".format(first.speaker)
    return line + " ".join(w.text for w in words)


def _split_paragraphs(words: WordSequence) -> List[List[Word]]:
    paragraphs: List[List[Word]] = []
    for word in words:
        if word.is_paragraph_start or not paragraphs:
            paragraphs.append([word])
        else:
            paragraphs[-1].append(word)
    return paragraphs


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces timestamped, speaker-labelled paragraphs."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, words: WordSequence) -> List[FormatterOutput]:
        lines = [_paragraph_line(p) for p in _split_paragraphs(words)]
        content = "\n\n".join(lines)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-transcript.txt",
                content=content,
                media_type="text/plain",
            )
        ]
