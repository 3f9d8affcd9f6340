"""Exceptions raised for invalid generator parameters and arguments."""

from __future__ import annotations


class XorshiftError(ValueError):
    """Base class for all generator errors.

    Subclasses ``ValueError`` so callers that only know the standard
    exception hierarchy can still catch bad input.
    """

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.param_name = param_name


class InvalidParameter(XorshiftError):
    """Raised when the multiplier/carry pair is unusable (``a <= c``)."""


class InvalidArgument(XorshiftError):
    """Raised for a bad call argument, e.g. a negative sample count."""
