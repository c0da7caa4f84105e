"""
Part Validator - Adjacency checks between numbers and symbols.

A number at row y with span C is adjacent to a symbol at (y', c) when
y' is within one row of y and c lies in C. Because C carries one padding
column on each side this covers all eight neighbours.
"""

import logging
from dataclasses import dataclass
from functools import reduce
from operator import mul
from typing import List, Optional, Tuple

from ..errors import ArithmeticPrecondition
from .grid import SchematicIndex
from .tokens import NumberToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gear:
    """
    A gear candidate and the numbers touching it.

    Attributes:
        row: Row of the gear symbol
        column: Column of the gear symbol
        parts: Adjacent numbers in reading order
    """
    row: int
    column: int
    parts: Tuple[NumberToken, ...]

    @property
    def ratio(self) -> int:
        """Product of all adjacent part values."""
        if not self.parts:
            raise ArithmeticPrecondition(f"gear at ({self.row},{self.column}) has no adjacent numbers")
        return reduce(mul, (part.value for part in self.parts))


def neighbor_rows(row: int, row_count: Optional[int] = None) -> List[int]:
    """
    Rows to check around a row, deduplicated and in bounds.

    Args:
        row: Centre row
        row_count: Total rows, used to clip the last row. None means unbounded.

    Returns:
        Sorted list of row indices
    """
    rows = {row - 1, row, row + 1}
    return sorted(
        r for r in rows
        if r >= 0 and (row_count is None or r < row_count)
    )


def is_adjacent(number: NumberToken, row: int, column: int) -> bool:
    """
    Check whether a symbol position touches a number.

    Args:
        number: Number token with its row attached
        row: Symbol row
        column: Symbol column

    Returns:
        True if the symbol lies in the number's neighbourhood
    """
    if number.row is None:
        return False
    return abs(row - number.row) <= 1 and column in number.columns


def find_part_numbers(index: SchematicIndex) -> List[NumberToken]:
    """
    Keep numbers adjacent to at least one symbol.

    Args:
        index: Schematic index built with the part-symbol predicate

    Returns:
        Part numbers in reading order
    """
    parts = []
    for number in index.iter_numbers():
        for row in neighbor_rows(number.row, index.row_count):
            columns = index.symbols.get(row)
            if columns and any(column in number.columns for column in columns):
                parts.append(number)
                break
    logger.debug(f"{len(parts)} of {index.number_count} numbers are part numbers")
    return parts


def sum_part_numbers(index: SchematicIndex) -> int:
    """Sum of all part number values."""
    return sum(number.value for number in find_part_numbers(index))


def find_gears(index: SchematicIndex, strict: bool = False) -> List[Gear]:
    """
    Collect gear symbols touching enough numbers.

    Args:
        index: Schematic index built with the gear-symbol predicate
        strict: Require exactly two adjacent numbers instead of two or more

    Returns:
        Gears in reading order
    """
    gears = []
    for row, column in index.iter_symbols():
        parts = tuple(
            number
            for check_row in neighbor_rows(row, index.row_count)
            for number in index.numbers.get(check_row, ())
            if column in number.columns
        )
        if len(parts) == 2 or (not strict and len(parts) > 2):
            gears.append(Gear(row=row, column=column, parts=parts))
    logger.debug(f"{len(gears)} of {index.symbol_count} gear symbols qualify")
    return gears


def sum_gear_ratios(index: SchematicIndex, strict: bool = False) -> int:
    """Sum of gear ratios across all qualifying gears."""
    return sum(gear.ratio for gear in find_gears(index, strict=strict))
