"""
Puzzle input loading.
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def input_path(day: int, input_dir: Union[str, Path] = "inputs") -> Path:
    """
    Default input file for a day.

    Args:
        day: Puzzle day
        input_dir: Directory holding input files

    Returns:
        Path such as inputs/day-03.txt
    """
    return Path(input_dir) / f"day-{day:02d}.txt"


def read_input(path: Union[str, Path]) -> str:
    """
    Read a puzzle input file.

    Args:
        path: Input file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    text = path.read_text(encoding='utf-8')
    logger.debug(f"Read {len(text)} characters from {path}")
    return text
