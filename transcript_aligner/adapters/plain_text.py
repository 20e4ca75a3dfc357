"""Adapter: pasted or plain-text transcript to Word list.

WHY: Most transcripts start life as text pasted from a document, with no
timing at all. The engine needs them as Words before times can be
attached.

HOW: Split on any run of whitespace; one Word per token.

RULES:
- Every word is untimed (start = end = None)
- The whole text is one block: only the first word is a paragraph start
- Empty or whitespace-only text gives an empty list
"""

from __future__ import annotations

from transcript_aligner.core.ir import Word, WordSequence


def parse_plain_text(text: str) -> WordSequence:
    """Split *text* on whitespace into untimed Words."""
    tokens = text.split()
    return [
        Word(number=index, text=token, is_paragraph_start=(index == 1))
        for index, token in enumerate(tokens, start=1)
    ]
