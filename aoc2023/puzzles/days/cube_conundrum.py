"""
Day 2: Cube Conundrum - Games of colored cubes drawn from a bag.

Record format:
    Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ...errors import ArithmeticPrecondition, MalformedLine
from ...text import split_lines
from ..base import PuzzleSolver
from ..factory import register_solver

logger = logging.getLogger(__name__)


COLORS: Tuple[str, ...] = ("red", "green", "blue")

# Bag contents for the possibility check
DEFAULT_LIMITS: Dict[str, int] = {"red": 12, "green": 13, "blue": 14}

GAME_PREFIX = "Game "


@dataclass(frozen=True)
class Round:
    """
    One handful of cubes.

    Attributes:
        draws: (quantity, color) pairs as revealed
    """
    draws: Tuple[Tuple[int, str], ...]

    def count(self, color: str) -> int:
        """Largest quantity of a color in this round, 0 if absent."""
        return max((qty for qty, c in self.draws if c == color), default=0)

    def is_possible(self, limits: Dict[str, int]) -> bool:
        return all(qty <= limits[color] for qty, color in self.draws)


@dataclass(frozen=True)
class Game:
    """
    A game record.

    Attributes:
        id: Game number
        rounds: Rounds in the order played
    """
    id: int
    rounds: Tuple[Round, ...]

    def is_possible(self, limits: Dict[str, int]) -> bool:
        """True if no round exceeds the bag limits."""
        return all(round_.is_possible(limits) for round_ in self.rounds)

    def min_cubes(self, color: str) -> int:
        """
        Fewest cubes of a color that make every round possible.

        Raises:
            ArithmeticPrecondition: If the game has no rounds
        """
        if not self.rounds:
            raise ArithmeticPrecondition(f"game {self.id} has no rounds")
        return max(round_.count(color) for round_ in self.rounds)

    def power(self) -> int:
        """Product of the minimum red, green and blue counts."""
        result = 1
        for color in COLORS:
            result *= self.min_cubes(color)
        return result


def parse_draw(text: str, line: str) -> Tuple[int, str]:
    """Parse '3 blue' into (3, 'blue')."""
    fields = text.split()
    if len(fields) != 2:
        raise MalformedLine(f"bad draw {text!r}", line=line)
    qty, color = fields
    if not qty.isdecimal():
        raise MalformedLine(f"bad quantity {qty!r}", line=line)
    if color not in COLORS:
        raise MalformedLine(f"unknown color {color!r}", line=line)
    return int(qty), color


def parse_game(line: str) -> Game:
    """
    Parse one game record.

    Args:
        line: Trimmed record line

    Returns:
        Parsed Game

    Raises:
        MalformedLine: If the header, a quantity or a color is invalid
        ArithmeticPrecondition: If the game has no rounds
    """
    header, sep, body = line.partition(":")
    if not sep or not header.startswith(GAME_PREFIX):
        raise MalformedLine("missing 'Game <id>:' header", line=line)

    game_id = header[len(GAME_PREFIX):].strip()
    if not game_id.isdecimal():
        raise MalformedLine(f"bad game id {game_id!r}", line=line)

    if not body.strip():
        raise ArithmeticPrecondition(f"game {game_id} has no rounds")

    rounds = []
    for round_text in body.split(";"):
        draws = tuple(parse_draw(draw, line) for draw in round_text.split(","))
        rounds.append(Round(draws=draws))

    return Game(id=int(game_id), rounds=tuple(rounds))


def parse_games(input_text: str) -> List[Game]:
    """Parse all game records, attaching row numbers to parse failures."""
    games = []
    for row, line in enumerate(split_lines(input_text)):
        try:
            games.append(parse_game(line))
        except MalformedLine as e:
            raise MalformedLine(str(e), line=line, row=row) from e
    return games


EXAMPLE_GAMES = (
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue\n"
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red\n"
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"
)


@register_solver
class PossibleGames(PuzzleSolver):
    """
    Sum of IDs of games possible with a bag of limited cubes.

    Args:
        limits: Per-color cube counts in the bag (defaults to 12 red,
                13 green, 14 blue). Missing colors keep their default.
    """
    name = "day02-part1"
    day = 2
    part = 1
    title = "Cube Conundrum"
    description = "Sum of IDs of games within the bag limits"
    example_input = EXAMPLE_GAMES
    example_answer = "8"

    def __init__(self, limits: Optional[Dict[str, int]] = None):
        self.limits = dict(DEFAULT_LIMITS)
        if limits:
            self.limits.update(limits)

    def solve(self, input_text: str) -> int:
        total = 0
        for game in parse_games(input_text):
            if game.is_possible(self.limits):
                total += game.id
            else:
                logger.debug(f"Game {game.id} exceeds {self.limits}")
        return total


@register_solver
class MinimumCubePower(PuzzleSolver):
    """Sum of the power of the minimum cube set for each game."""
    name = "day02-part2"
    day = 2
    part = 2
    title = "Cube Conundrum"
    description = "Sum of powers of minimum cube sets"
    example_input = EXAMPLE_GAMES
    example_answer = "2286"

    def solve(self, input_text: str) -> int:
        return sum(game.power() for game in parse_games(input_text))
