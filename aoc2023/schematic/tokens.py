"""
Token Module - Classified units of one schematic line.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class NumberToken:
    """
    A maximal run of decimal digits.

    The adjacency span covers the digits plus one padding column on each
    side, so a symbol directly left, right or diagonal of the run falls
    inside it.

    Attributes:
        value: Parsed integer value of the run
        start: Column of the first digit
        length: Number of digits in the run
        row: Row index, attached by the grid indexer
    """
    value: int
    start: int
    length: int
    row: Optional[int] = None

    @property
    def end(self) -> int:
        """Column of the last digit (inclusive)."""
        return self.start + self.length - 1

    @property
    def columns(self) -> range:
        """Inclusive adjacency span [start-1, start+length], clamped at 0."""
        return range(max(0, self.start - 1), self.start + self.length + 1)

    def with_row(self, row: int) -> 'NumberToken':
        """
        Return a copy of this token attached to a row.

        Args:
            row: Zero-based row index

        Returns:
            New NumberToken with row set
        """
        return replace(self, row=row)


@dataclass(frozen=True)
class SymbolToken:
    """A single symbol character at a column."""
    column: int


@dataclass(frozen=True)
class BlankToken:
    """A maximal run of filler characters. Discarded by the indexer."""
    start: int = 0
    length: int = 0


Token = Union[NumberToken, SymbolToken, BlankToken]
