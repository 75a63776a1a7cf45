from __future__ import annotations


class LayoutError(ValueError):
    """Base class for input rejected by the seat layout engine."""


class InvalidConfiguration(LayoutError):
    """Geometry cannot hold any seats (bad dimensions, angles or gaps)."""


class InvalidPartyData(LayoutError):
    """Party list is malformed (negative/non-integer counts, duplicates, zero total)."""
