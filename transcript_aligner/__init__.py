"""Transcript Aligner — word-level timestamp reconciliation for transcripts.

WHY: A transcript a person trusts (pasted, edited, corrected) and a word
list a machine timed (forced aligner, ASR) are two different documents.
Editors need the first one's text with the second one's timing. This
package reconciles them.

HOW: Three stages — adapt (third-party JSON and text into Words),
reconcile (match, align, interpolate in the pure core engine), format
(plain text export or words JSON). Each stage is independently testable.

RULES:
- All stages exchange the same Word list
- The engine in core/ is pure: no I/O, no retained state
- Adding a new input or output format touches only adapters/ or formatters/
"""

__version__ = "0.1.0"
