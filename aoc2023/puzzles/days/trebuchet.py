"""
Day 1: Trebuchet?! - Calibration values from the first and last digit of each line.
"""

import logging
from typing import Dict, List

from ...errors import ArithmeticPrecondition
from ...text import split_lines
from ..base import PuzzleSolver
from ..factory import register_solver

logger = logging.getLogger(__name__)


NUMBER_WORDS: Dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def find_digits(line: str, spelled: bool = False) -> List[int]:
    """
    Find every digit in a line, in order of starting column.

    A single left-to-right scan. Spelled-out words may overlap, so
    "twone" yields [2, 1].

    Args:
        line: Input line
        spelled: Also recognize the words "one" through "nine"

    Returns:
        Digits in order of appearance
    """
    digits = []
    for col, char in enumerate(line):
        if "0" <= char <= "9":
            digits.append(int(char))
        elif spelled:
            for word, value in NUMBER_WORDS.items():
                if line.startswith(word, col):
                    digits.append(value)
                    break
    return digits


def calibration_value(line: str, spelled: bool = False) -> int:
    """
    Combine the first and last digit of a line into a two-digit number.

    Args:
        line: Input line
        spelled: Also recognize spelled-out digits

    Returns:
        first * 10 + last

    Raises:
        ArithmeticPrecondition: If the line contains no digit
    """
    digits = find_digits(line, spelled)
    if not digits:
        raise ArithmeticPrecondition(f"no digit in line {line!r}")
    return digits[0] * 10 + digits[-1]


class _CalibrationSolver(PuzzleSolver):
    day = 1
    title = "Trebuchet?!"
    spelled = False

    def solve(self, input_text: str) -> int:
        total = 0
        for line in split_lines(input_text):
            value = calibration_value(line, self.spelled)
            logger.debug(f"{line!r} -> {value}")
            total += value
        return total


@register_solver
class CalibrationDigits(_CalibrationSolver):
    """Sum of calibration values using digit characters only."""
    name = "day01-part1"
    part = 1
    description = "Calibration sum from digit characters"
    example_input = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"
    example_answer = "142"


@register_solver
class CalibrationWords(_CalibrationSolver):
    """Sum of calibration values counting spelled-out digits."""
    name = "day01-part2"
    part = 2
    description = "Calibration sum from digits and number words"
    spelled = True
    example_input = (
        "two1nine\n"
        "eightwothree\n"
        "abcone2threexyz\n"
        "xtwone3four\n"
        "4nineeightseven2\n"
        "zoneight234\n"
        "7pqrstsixteen"
    )
    example_answer = "281"
