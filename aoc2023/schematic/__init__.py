"""
Schematic Package - Tokenizer and adjacency validator for engine schematics.

An engine schematic is a grid of digits, symbols and '.' filler. Numbers
touching a symbol (including diagonally) are part numbers; a '*' touching
two numbers is a gear.

Public API:
    - tokenize_line(): Split one line into tokens
    - build_index(): Index numbers and symbols by row
    - find_part_numbers() / sum_part_numbers(): Part-number check
    - find_gears() / sum_gear_ratios(): Gear check
    - save_debug_image(): Annotated rendering for diagnostics

Usage:
    from aoc2023.schematic import build_index, sum_part_numbers, is_part_symbol

    index = build_index(text, is_part_symbol)
    total = sum_part_numbers(index)
"""

# Tokens
from .tokens import NumberToken, SymbolToken, BlankToken, Token

# Tokenizer
from .tokenizer import (
    DIGITS,
    FILLER,
    GEAR,
    is_part_symbol,
    is_gear_symbol,
    tokenize_line,
)

# Indexing and validation
from .grid import SchematicIndex, build_index
from .validator import (
    Gear,
    neighbor_rows,
    is_adjacent,
    find_part_numbers,
    sum_part_numbers,
    find_gears,
    sum_gear_ratios,
)

# Debug utilities
from .debug import DEBUG_DIR, save_debug_image

__all__ = [
    # Tokens
    "NumberToken",
    "SymbolToken",
    "BlankToken",
    "Token",
    # Tokenizer
    "DIGITS",
    "FILLER",
    "GEAR",
    "is_part_symbol",
    "is_gear_symbol",
    "tokenize_line",
    # Indexing and validation
    "SchematicIndex",
    "build_index",
    "Gear",
    "neighbor_rows",
    "is_adjacent",
    "find_part_numbers",
    "sum_part_numbers",
    "find_gears",
    "sum_gear_ratios",
    # Debug
    "DEBUG_DIR",
    "save_debug_image",
]
