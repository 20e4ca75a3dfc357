"""Reconciliation engine and intermediate representation.

WHY: The core package holds the pure functions that attach timestamps to
transcript words — normalization, the two matchers, and the interpolator —
plus the Word IR they share. Adapters and formatters depend on core, never
the other way round.

HOW: ir.py defines Word; normalize.py, matcher.py, aligner.py and
interpolate.py are the engine stages; reconcile.py composes them;
timecode.py and sources.py are small helpers for the outer layers.

RULES:
- Engine functions are pure: no I/O, no shared state, inputs never mutated
- Empty sequences are valid input everywhere
"""
