"""Words JSON formatter — the full reconciled word list.

WHY: Downstream tools (caption builders, timeline views, a later engine
run) need every word with its timing, speaker and paragraph flag in a
machine-readable form that can be read back without loss.

HOW: Each Word becomes one object; the document carries a version and
is validated against the packaged words schema before it is returned,
the same schema parse_words_json reads with.

RULES:
- Document: {"version": "1.0.0", "words": [...]}
- Word object keys: number, text, start, end, speaker, paragraph_start
- Unknown times are written as null
- Validate output against the schema before returning; raise on failure
- Output suffix: "-words.json"; media type "application/json"
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

import jsonschema

from transcript_aligner.core.ir import Word, WordSequence
from transcript_aligner.formatters.base import BaseFormatter, FormatterOutput
from transcript_aligner.schemas import get_words_schema

WORDS_JSON_VERSION = "1.0.0"


def _word_to_dict(word: Word) -> Dict[str, Any]:
    return {
        "number": word.number,
        "text": word.text,
        "start": word.start,
        "end": word.end,
        "speaker": word.speaker,
        "paragraph_start": word.is_paragraph_start,
    }


class WordsJsonFormatter(BaseFormatter):
    """Formatter that serialises the word list to schema-validated JSON."""

    @property
    def name(self) -> str:
        return "Words JSON"

    def format(self, words: WordSequence) -> List[FormatterOutput]:
        """Serialise *words* to JSON.

        Raises:
            jsonschema.ValidationError: If the document does not validate
                (e.g. a negative timestamp reached the formatter).
        """
        document = {
            "version": WORDS_JSON_VERSION,
            "words": [_word_to_dict(w) for w in words],
        }
        jsonschema.validate(instance=document, schema=get_words_schema())

        return [
            FormatterOutput(
                suffix="-words.json",
                content=json.dumps(document, indent=2, ensure_ascii=False) + "\n",
                media_type="application/json",
            )
        ]
