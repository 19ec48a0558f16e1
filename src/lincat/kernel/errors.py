"""Error types for the category kernel and the linear-map algebra."""

from __future__ import annotations


class LincatError(Exception):
    """Base error for lincat.

    Every error keeps the value that triggered it so callers can
    inspect the offending expression or space.
    """

    def __init__(self, message: str, subject: object = None) -> None:
        self.subject = subject
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, subject={self.subject!r})"


class ShapeMismatchError(LincatError, ValueError):
    """Raised when domains, codomains or matrix blocks do not line up."""


class UndefinedDimensionError(LincatError):
    """Raised when a function space is asked for a finite dimension."""


class NotYetSupportedError(LincatError, NotImplementedError):
    """Raised for rewrites the algebra has no rule for.

    Composing through a family evaluation on the right-hand side is the
    known case.
    """


class CapabilityError(LincatError, TypeError):
    """Raised when a category lacks a structure an expression needs."""
