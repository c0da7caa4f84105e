"""
Input text helpers shared by all solvers.
"""

from typing import List


def split_lines(text: str) -> List[str]:
    """
    Split an input blob into trimmed lines.

    Leading and trailing blank lines of the blob are dropped; blank lines
    in the middle are kept so that solvers can reject them.

    Args:
        text: Raw puzzle input

    Returns:
        List of lines with surrounding whitespace removed
    """
    stripped = text.strip()
    if not stripped:
        return []
    return [line.strip() for line in stripped.splitlines()]
