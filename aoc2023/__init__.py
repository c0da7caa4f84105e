"""
Advent of Code 2023 - Daily puzzle solvers.

Subpackages:
    - puzzles: Solver registry and the per-day solvers
    - schematic: Grid tokenizer and adjacency validator (day 3)
"""

__version__ = "0.1.0"
