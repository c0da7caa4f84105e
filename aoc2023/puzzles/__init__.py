"""
Puzzles Package - Registry of daily puzzle solvers.

Every solver is a pure function from an input string to a decimal answer
string. Solvers are registered by name ("day03-part2") and created
through the factory.

Public API:
    - PuzzleSolver: Abstract base for solvers
    - Answer / AnswerMetrics: Result of a run
    - create_solver(): Factory function by name
    - create_solver_for(): Factory function by day and part
    - get_solver_names(): List available solvers
    - get_solver_info(): Get solver metadata

Usage:
    from aoc2023.puzzles import create_solver_for

    solver = create_solver_for(3, 1)
    print(solver.process(text))
"""

# Core data structures
from .answer import Answer, AnswerMetrics

# Solver framework
from .base import PuzzleSolver
from .factory import (
    solver_name,
    create_solver,
    create_solver_for,
    get_solver_names,
    get_solver_info,
    get_days,
    register_solver,
)

# Import days to register them
from . import days

__all__ = [
    # Data structures
    "Answer",
    "AnswerMetrics",
    # Solver framework
    "PuzzleSolver",
    "solver_name",
    "create_solver",
    "create_solver_for",
    "get_solver_names",
    "get_solver_info",
    "get_days",
    "register_solver",
]
