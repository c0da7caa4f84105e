"""
Days Package - Concrete solver implementations.

Import this module to register all built-in solvers.
"""

from .trebuchet import CalibrationDigits, CalibrationWords
from .cube_conundrum import PossibleGames, MinimumCubePower
from .gear_ratios import PartNumbers, GearRatios

__all__ = [
    "CalibrationDigits",
    "CalibrationWords",
    "PossibleGames",
    "MinimumCubePower",
    "PartNumbers",
    "GearRatios",
]
