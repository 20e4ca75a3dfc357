"""Token normalization and suffix-tolerant token comparison.

WHY: A transcript typed by a person and the word list produced by an
aligner rarely agree character for character. Case, surrounding
punctuation, possessive apostrophes ("sheriff's" vs "sheriffs") and
hyphenation ("re-enter" vs "reenter") all drift between the two. Matching
has to look past that drift without becoming a general fuzzy matcher.

HOW: normalize_token() reduces a word to a comparison key. tokens_match()
compares two keys, tolerating a single trailing "s" on either side.

RULES:
- Lowercase first, then strip edge punctuation . , ! ? ; : " ( ) [ ] { }
- Typographic apostrophes fold to "'" and then every apostrophe is removed
- Every hyphen is removed
- No Unicode normalization, no inner whitespace handling
- tokens_match: exact, or one side equals the other plus a trailing "s"
"""

from __future__ import annotations

import re

# Edge punctuation stripped from both ends of a token.
_EDGE_PUNCTUATION_RE = re.compile(r'^[.,!?;:"()\[\]{}]+|[.,!?;:"()\[\]{}]+$')


def normalize_token(text: str) -> str:
    """Reduce a word to its comparison key.

    >>> normalize_token("Sheriff's,")
    'sheriffs'
    """
    normalized = text.lower()
    normalized = normalized.replace("’", "'")
    normalized = _EDGE_PUNCTUATION_RE.sub("", normalized)
    normalized = normalized.replace("'", "")
    normalized = normalized.replace("-", "")
    return normalized


def tokens_match(a: str, b: str) -> bool:
    """Return True if two normalized tokens count as the same word.

    Only exact equality and single-"s" suffix drift are tolerated.
    """
    if a == b:
        return True
    if a.endswith("s") and a[:-1] == b:
        return True
    if b.endswith("s") and b[:-1] == a:
        return True
    return False
