"""
Grid Indexer - Folds per-line tokens into row-keyed number and symbol indexes.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

from ..errors import MalformedLine
from ..text import split_lines
from .tokenizer import SymbolPredicate, is_part_symbol, tokenize_line
from .tokens import NumberToken, SymbolToken

logger = logging.getLogger(__name__)


@dataclass
class SchematicIndex:
    """
    Numbers and symbols of a schematic, keyed by row.

    Rows without numbers or symbols are absent from the respective map.
    Built once per input by build_index() and only read afterwards.

    Attributes:
        numbers: Row -> number tokens in left-to-right order
        symbols: Row -> set of symbol columns
        row_count: Number of rows in the input
    """
    numbers: Dict[int, List[NumberToken]] = field(default_factory=dict)
    symbols: Dict[int, Set[int]] = field(default_factory=dict)
    row_count: int = 0

    def iter_numbers(self) -> Iterator[NumberToken]:
        """Yield all numbers in row order, then column order."""
        for row in sorted(self.numbers):
            yield from self.numbers[row]

    def iter_symbols(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, column) for all symbols in reading order."""
        for row in sorted(self.symbols):
            for column in sorted(self.symbols[row]):
                yield row, column

    @property
    def number_count(self) -> int:
        return sum(len(numbers) for numbers in self.numbers.values())

    @property
    def symbol_count(self) -> int:
        return sum(len(columns) for columns in self.symbols.values())


def build_index(text: str, is_symbol: SymbolPredicate = is_part_symbol) -> SchematicIndex:
    """
    Tokenize every line and route tokens into a SchematicIndex.

    Args:
        text: Full schematic; line position is the row index
        is_symbol: Predicate deciding which characters are symbols

    Returns:
        Populated SchematicIndex

    Raises:
        MalformedLine: If any line fails to tokenize. No partial index is returned.
    """
    lines = split_lines(text)
    index = SchematicIndex(row_count=len(lines))

    for row, line in enumerate(lines):
        try:
            tokens = tokenize_line(line, is_symbol)
        except MalformedLine as e:
            raise MalformedLine("line could not be tokenized", line=line, row=row) from e

        for token in tokens:
            if isinstance(token, NumberToken):
                index.numbers.setdefault(row, []).append(token.with_row(row))
            elif isinstance(token, SymbolToken):
                index.symbols.setdefault(row, set()).add(token.column)

    logger.debug(
        f"Indexed {index.row_count} rows: "
        f"{index.number_count} numbers, {index.symbol_count} symbols"
    )
    return index
