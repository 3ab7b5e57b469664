"""
Exception types.

`ScoringError` and `PreconditionError` subclass `ValueError` so the API layer can keep
treating them as bad input (HTTP 400), the same way it treats pydantic validation errors.
"""

from __future__ import annotations


class GolfScoreError(Exception):
    """Base class for all golfscore errors."""


class ScoringError(GolfScoreError, ValueError):
    """An input value fell outside every bucket of a threshold table."""


class PreconditionError(GolfScoreError, ValueError):
    """The scoring core was called with inputs that break its contract."""


class ProviderError(GolfScoreError):
    """The weather or geocoding provider failed or returned an unusable payload."""
