"""Exceptions for caller mistakes.

Bad or missing farm data never raises; the engine substitutes a displayable
value instead. These are reserved for lookups and transitions that only a
programming error can produce.
"""


class UnknownCropError(LookupError):
    """Raised by strict catalog lookups for a crop name with no reference entry."""


class DiagnosticStateError(ValueError):
    """Raised when a diagnostic selection is made out of order or is not on offer."""
