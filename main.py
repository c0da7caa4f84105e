"""
Advent of Code 2023 - Entry Point

Runs one or both parts of a day's puzzle against an input file or the
built-in example.

Example:
    python main.py 3
    python main.py 1 --part 2 --input my_input.txt
    python main.py 3 --example --debug
    python main.py --list
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from aoc2023.errors import ProcessingError
from aoc2023.inputs import input_path, read_input
from aoc2023.puzzles import (
    Answer,
    PuzzleSolver,
    create_solver_for,
    get_days,
    get_solver_info,
)
from aoc2023.schematic import save_debug_image
from aoc2023.settings import load_settings, save_settings


logger = logging.getLogger(__name__)

LOG_FILE = "aoc.log"


def configure_logging(debug: bool) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Command-line controller.

    Resolves settings against CLI flags, builds solvers and reports answers.
    """

    def __init__(self, args: argparse.Namespace, settings: Dict[str, Any]):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments
            settings: Loaded persistent settings
        """
        self.args = args
        self.settings = settings

        # CLI flags override saved settings
        self.debug_mode = args.debug or settings.get("debug_enabled", False)
        self.strict_gears = args.strict_gears or settings.get("strict_gears", False)
        self.input_dir = settings.get("input_dir", "inputs")

    def solver_kwargs(self, day: int, part: int) -> Dict[str, Any]:
        """Constructor arguments for solvers that take configuration."""
        if day == 2 and part == 1:
            return {"limits": self.settings.get("cube_limits")}
        if day == 3 and part == 2:
            return {"strict": self.strict_gears}
        return {}

    def parts(self) -> List[int]:
        return [self.args.part] if self.args.part else [1, 2]

    def load_text(self, solver: PuzzleSolver) -> str:
        """Input text for a solver: its example, or the input file."""
        if self.args.example:
            return solver.example_input
        path = Path(self.args.input) if self.args.input else input_path(solver.day, self.input_dir)
        return read_input(path)

    def run_part(self, day: int, part: int) -> Optional[Answer]:
        """Run one part. Returns None if the part failed."""
        solver = create_solver_for(day, part, **self.solver_kwargs(day, part))
        try:
            text = self.load_text(solver)
        except OSError as e:
            logger.error(f"Could not read input for {solver.name}: {e}")
            return None

        try:
            answer = solver.run(text)
        except ProcessingError as e:
            logger.error(f"{e}: {e.__cause__}")
            return None

        print(answer)
        if self.args.example and answer.value != solver.example_answer:
            logger.warning(f"Example mismatch for {solver.name}: expected {solver.example_answer}")

        if self.debug_mode and day == 3:
            path = save_debug_image(text, strict=self.strict_gears)
            logger.info(f"Schematic debug image: {path}")

        return answer

    def run(self) -> int:
        """
        Run the requested parts.

        Returns:
            Exit code
        """
        if self.args.save_settings:
            self.settings["debug_enabled"] = self.debug_mode
            self.settings["strict_gears"] = self.strict_gears
            save_settings(self.settings)

        if self.args.day not in get_days():
            logger.error(f"No solvers for day {self.args.day}. Available: {get_days()}")
            return 2

        results = [self.run_part(self.args.day, part) for part in self.parts()]
        return 0 if all(results) else 1


def list_solvers() -> None:
    """Print the registered solvers."""
    for info in get_solver_info():
        print(f"{info['name']:<14} {info['title']:<16} {info['description']}")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2023 - Daily puzzle solvers"
    )
    parser.add_argument(
        "day",
        type=int,
        nargs="?",
        help="Puzzle day to run"
    )
    parser.add_argument(
        "--part", "-p",
        type=int,
        choices=(1, 2),
        help="Run only this part (default: both)"
    )
    parser.add_argument(
        "--input", "-i",
        help="Input file (default: <input_dir>/day-DD.txt)"
    )
    parser.add_argument(
        "--example", "-e",
        action="store_true",
        help="Run the built-in example instead of an input file"
    )
    parser.add_argument(
        "--strict-gears",
        action="store_true",
        help="Day 3: only count gears touching exactly two numbers"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging (and save schematic images for day 3)"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the effective debug and gear settings to config.json"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available solvers and exit"
    )
    args = parser.parse_args(argv)
    if not args.list and args.day is None:
        parser.error("a day is required unless --list is given")
    return args


def main():
    """Parse arguments and run the requested solvers."""
    args = parse_args()
    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))

    if args.list:
        list_solvers()
        sys.exit(0)

    application = Application(args, settings)
    sys.exit(application.run())


if __name__ == "__main__":
    main()
