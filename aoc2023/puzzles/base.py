"""
Base Solver Module - Abstract base class for daily puzzle solvers.
"""

import logging
import time
from abc import ABC, abstractmethod

from ..errors import ProcessingError, PuzzleInputError
from ..text import split_lines
from .answer import Answer, AnswerMetrics

logger = logging.getLogger(__name__)


class PuzzleSolver(ABC):
    """
    Abstract base class for all puzzle solvers.

    Subclasses implement solve() and define the class attributes below.
    Each instance is stateless between calls: running the same input
    twice yields the same answer.

    Attributes:
        name: Registry key, e.g. "day03-part1"
        day: Puzzle day
        part: Puzzle part
        title: Puzzle title
        description: Human-readable description for listings
        example_input: Sample input from the puzzle text
        example_answer: Expected answer for example_input
    """
    name: str = "base"
    day: int = 0
    part: int = 0
    title: str = ""
    description: str = "Base solver"
    example_input: str = ""
    example_answer: str = ""

    @abstractmethod
    def solve(self, input_text: str) -> int:
        """
        Compute the numeric answer for the given input.

        Args:
            input_text: Full puzzle input

        Returns:
            Numeric answer

        Raises:
            MalformedLine: If a line cannot be parsed
            ArithmeticPrecondition: If a required element is missing
        """
        pass

    def process(self, input_text: str) -> str:
        """
        Compute the answer as a decimal string.

        Args:
            input_text: Full puzzle input

        Returns:
            Decimal answer string

        Raises:
            ProcessingError: If the input could not be processed
        """
        try:
            result = self.solve(input_text)
        except PuzzleInputError as e:
            logger.debug(f"{self.name} failed: {e}")
            raise ProcessingError(f"Day {self.day} part {self.part} processing failed") from e
        return str(result)

    def run(self, input_text: str) -> Answer:
        """
        Process input and collect metrics.

        Args:
            input_text: Full puzzle input

        Returns:
            Answer with value and metrics
        """
        start_time = time.perf_counter()
        value = self.process(input_text)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(f"{self.name}: {value} ({elapsed_ms:.2f}ms)")
        return Answer(
            value=value,
            day=self.day,
            part=self.part,
            metrics=AnswerMetrics(
                computation_time_ms=elapsed_ms,
                lines_processed=len(split_lines(input_text)),
                solver_name=self.name,
            ),
        )

    def check_example(self) -> bool:
        """
        Run the solver on its built-in example.

        Returns:
            True if the example answer matches
        """
        if not self.example_input:
            logger.warning(f"{self.name} has no example input")
            return False
        value = self.process(self.example_input)
        if value != self.example_answer:
            logger.warning(f"{self.name} example mismatch: got {value}, expected {self.example_answer}")
            return False
        return True
