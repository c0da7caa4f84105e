"""
Solver Factory Module - Registry and factory for solver instantiation.
"""

from typing import Dict, List, Type, Any

from .base import PuzzleSolver


# Global registry of solvers
_SOLVERS: Dict[str, Type[PuzzleSolver]] = {}


def solver_name(day: int, part: int) -> str:
    """
    Build the registry key for a day and part.

    Args:
        day: Puzzle day
        part: Puzzle part

    Returns:
        Name such as "day03-part2"
    """
    return f"day{day:02d}-part{part}"


def register_solver(cls: Type[PuzzleSolver]) -> Type[PuzzleSolver]:
    """
    Decorator to register a solver class.

    Usage:
        @register_solver
        class MySolver(PuzzleSolver):
            name = "day04-part1"
            ...

    Args:
        cls: Solver class to register

    Returns:
        The same class (for decorator chaining)
    """
    _SOLVERS[cls.name] = cls
    return cls


def create_solver(name: str, **kwargs: Any) -> PuzzleSolver:
    """
    Create a solver instance by name.

    Args:
        name: Solver name (e.g., "day01-part1")
        **kwargs: Additional arguments passed to solver constructor

    Returns:
        Solver instance

    Raises:
        ValueError: If solver name not found
    """
    if name not in _SOLVERS:
        available = ", ".join(_SOLVERS.keys())
        raise ValueError(f"Unknown solver: {name}. Available: {available}")
    return _SOLVERS[name](**kwargs)


def create_solver_for(day: int, part: int, **kwargs: Any) -> PuzzleSolver:
    """Create the solver registered for a day and part."""
    return create_solver(solver_name(day, part), **kwargs)


def get_solver_names() -> List[str]:
    """
    Get list of available solver names.

    Returns:
        Registered solver names, sorted by day and part
    """
    return sorted(_SOLVERS.keys())


def get_solver_info() -> List[Dict[str, Any]]:
    """
    Get metadata for all registered solvers.

    Returns:
        List of dicts with 'name', 'day', 'part', 'title' and 'description' keys
    """
    return [
        {
            "name": cls.name,
            "day": cls.day,
            "part": cls.part,
            "title": cls.title,
            "description": cls.description,
        }
        for cls in sorted(_SOLVERS.values(), key=lambda c: (c.day, c.part))
    ]


def get_days() -> List[int]:
    """Get the sorted list of days with at least one registered solver."""
    return sorted({cls.day for cls in _SOLVERS.values()})
