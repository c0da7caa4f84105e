"""
Answer Module - Result of a solver run and its metrics.
"""

from dataclasses import dataclass, field


@dataclass
class AnswerMetrics:
    """
    Performance metrics for a solver run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        lines_processed: Number of input lines handed to the solver
        solver_name: Name of solver that computed this answer
    """
    computation_time_ms: float = 0.0
    lines_processed: int = 0
    solver_name: str = ""


@dataclass
class Answer:
    """
    Result of a solver run.

    Attributes:
        value: Decimal answer string
        day: Puzzle day
        part: Puzzle part (1 or 2)
        metrics: Performance statistics
    """
    value: str
    day: int = 0
    part: int = 0
    metrics: AnswerMetrics = field(default_factory=AnswerMetrics)

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'Day 3 part 2'."""
        return f"Day {self.day} part {self.part}"

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"
