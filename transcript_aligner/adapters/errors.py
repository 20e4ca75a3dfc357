"""Errors raised at the format adapter boundary."""


class UnsupportedFormatError(ValueError):
    """Input document does not have any of the shapes an adapter accepts.

    The message names the expected shapes so the user can tell which
    export the file should have come from.
    """
