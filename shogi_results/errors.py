from __future__ import annotations


class StructuralViolation(RuntimeError):
    """Raised when a results page no longer has the layout the scanner expects."""
