"""
Error Types - Failure taxonomy shared by all puzzle solvers.

Solvers raise the typed PuzzleInputError subclasses internally; the
public PuzzleSolver.process() surface re-raises them as a single opaque
ProcessingError chained to the original cause.
"""

from typing import Optional


class PuzzleError(Exception):
    """Base class for all errors raised by this package."""


class PuzzleInputError(PuzzleError):
    """Input could not be turned into an answer."""


class MalformedLine(PuzzleInputError):
    """
    A line could not be tokenized or parsed.

    Attributes:
        line: Offending line text
        row: Zero-based row index, if known
    """

    def __init__(self, message: str, line: str = "", row: Optional[int] = None):
        self.line = line
        self.row = row
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)


class ArithmeticPrecondition(PuzzleInputError):
    """An operation expected at least one matching element and found none."""


class ProcessingError(PuzzleError):
    """Opaque failure reported to callers of PuzzleSolver.process()."""
