"""
Day 3: Gear Ratios - Part numbers and gears on an engine schematic.
"""

from ...schematic import (
    build_index,
    is_gear_symbol,
    is_part_symbol,
    sum_gear_ratios,
    sum_part_numbers,
)
from ..base import PuzzleSolver
from ..factory import register_solver


EXAMPLE_SCHEMATIC = (
    "467..114..\n"
    "...*......\n"
    "..35..633.\n"
    "......#...\n"
    "617*......\n"
    ".....+.58.\n"
    "..592.....\n"
    "......755.\n"
    "...$.*....\n"
    ".664.598.."
)


@register_solver
class PartNumbers(PuzzleSolver):
    """Sum of numbers adjacent to any symbol."""
    name = "day03-part1"
    day = 3
    part = 1
    title = "Gear Ratios"
    description = "Sum of part numbers adjacent to a symbol"
    example_input = EXAMPLE_SCHEMATIC
    example_answer = "4361"

    def solve(self, input_text: str) -> int:
        return sum_part_numbers(build_index(input_text, is_part_symbol))


@register_solver
class GearRatios(PuzzleSolver):
    """
    Sum of gear ratios.

    Args:
        strict: Only count '*' symbols touching exactly two numbers. By
                default two or more numbers qualify and all are multiplied.
    """
    name = "day03-part2"
    day = 3
    part = 2
    title = "Gear Ratios"
    description = "Sum of gear ratios for '*' symbols touching two numbers"
    example_input = EXAMPLE_SCHEMATIC
    example_answer = "467835"

    def __init__(self, strict: bool = False):
        self.strict = strict

    def solve(self, input_text: str) -> int:
        return sum_gear_ratios(build_index(input_text, is_gear_symbol), strict=self.strict)
