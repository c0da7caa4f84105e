"""
Line Tokenizer - Splits one schematic line into numbers, symbols and filler.

A line is consumed left to right. At each column the longest prefix of one
class is taken, in priority order:

    1. a run of digits        -> NumberToken
    2. one symbol character   -> SymbolToken
    3. a run of anything else -> BlankToken

Which characters count as symbols is decided by a predicate so the same
tokenizer serves both the part-number and the gear-ratio puzzles.
"""

import logging
from typing import Callable, List

from ..errors import MalformedLine
from .tokens import BlankToken, NumberToken, SymbolToken, Token

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
FILLER = "."
GEAR = "*"

SymbolPredicate = Callable[[str], bool]


def is_part_symbol(char: str) -> bool:
    """Any character that is neither a digit nor filler."""
    return char not in DIGITS and char != FILLER


def is_gear_symbol(char: str) -> bool:
    """Only the gear character."""
    return char == GEAR


def tokenize_line(line: str, is_symbol: SymbolPredicate = is_part_symbol) -> List[Token]:
    """
    Tokenize a single line.

    Args:
        line: Line of text without embedded newlines
        is_symbol: Predicate deciding which non-digit characters are symbols

    Returns:
        Tokens in column order, including BlankTokens

    Raises:
        MalformedLine: If the line is empty after trimming
    """
    text = line.strip()
    if not text:
        raise MalformedLine("empty line", line=line)

    logger.debug(f"Tokenizing: {text!r}")

    tokens: List[Token] = []
    col = 0
    width = len(text)

    while col < width:
        char = text[col]

        if char in DIGITS:
            end = col
            while end < width and text[end] in DIGITS:
                end += 1
            tokens.append(NumberToken(value=int(text[col:end]), start=col, length=end - col))
            col = end
        elif is_symbol(char):
            tokens.append(SymbolToken(column=col))
            col += 1
        else:
            end = col
            while end < width and text[end] not in DIGITS and not is_symbol(text[end]):
                end += 1
            tokens.append(BlankToken(start=col, length=end - col))
            col = end

    logger.debug(f"Tokens: {tokens}")
    return tokens
