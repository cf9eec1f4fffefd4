"""Command-line driver that animates a universe in the terminal."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional

from ..core.errors import InvalidDimension
from ..core.grid import Universe
from ..core.patterns import PatternLibrary
from ..core.seeds import SEED_RULES, get_seed_rule

logger = logging.getLogger(__name__)

# Clear the terminal and move the cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[H"


@dataclass
class RunConfig:
    """Configuration for an animated run."""
    width: int = Universe.REFERENCE_SIZE
    height: int = Universe.REFERENCE_SIZE
    seed: str = "reference"
    pattern: Optional[str] = None
    pattern_row: Optional[int] = None
    pattern_col: Optional[int] = None
    generations: int = 0
    delay: float = 0.01
    once: bool = False
    clear: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        return cls(
            width=args.width,
            height=args.height,
            seed=args.seed,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            generations=args.generations,
            delay=args.delay,
            once=args.once,
            clear=not args.no_clear,
        )


class CLIUniverse:
    """Terminal driver: renders a frame, ticks, and waits, until told to stop."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_universe(self, config: RunConfig) -> Universe:
        """Create the universe described by a run configuration.

        A named pattern takes precedence over the seed rule. Without explicit
        offsets the pattern is centred.

        Raises:
            InvalidDimension: If the configured size is not positive
            ValueError: If the pattern or seed rule is unknown
        """
        if not config.pattern:
            return Universe(config.width, config.height, get_seed_rule(config.seed, config.width))

        pattern = self.pattern_library.get_pattern(config.pattern)
        if pattern is None:
            raise ValueError(f"Pattern '{config.pattern}' not found")

        universe = Universe(config.width, config.height)
        pattern_width, pattern_height = pattern.get_size()
        offset_row = config.pattern_row
        if offset_row is None:
            offset_row = max(0, (config.height - pattern_height) // 2)
        offset_col = config.pattern_col
        if offset_col is None:
            offset_col = max(0, (config.width - pattern_width) // 2)

        logger.debug("Placing pattern '%s' at (%d, %d)", pattern.name, offset_row, offset_col)
        pattern.apply_to_universe(universe, offset_row, offset_col)
        return universe

    def draw_frame(self, universe: Universe, clear: bool = True) -> None:
        """Write the current generation and a status line to stdout."""
        if clear:
            sys.stdout.write(CLEAR_SCREEN)
        print(universe.render())
        print(f"Generation {universe.generation} | Population {universe.population}")
        sys.stdout.flush()

    def run(self, config: RunConfig) -> Universe:
        """Animate a universe.

        Each frame renders the current generation and then advances it by
        one tick. With ``generations`` > 0 the loop stops after that many
        frames; with ``once`` a single frame is drawn and nothing ticks.
        Ctrl+C stops the loop.

        Returns:
            The universe in its final state
        """
        universe = self.build_universe(config)

        try:
            while True:
                self.draw_frame(universe, config.clear)
                if config.once:
                    break

                universe.tick()
                if config.generations and universe.generation >= config.generations:
                    break

                if config.delay > 0:
                    time.sleep(config.delay)
        except KeyboardInterrupt:
            print(f"\nInterrupted at generation {universe.generation}")

        return universe

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                if pattern:
                    width, height = pattern.get_size()
                    print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")

        print(f"\nSeed rules: {', '.join(SEED_RULES)}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life on a toroidal grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Animate the 64x64 reference universe until Ctrl+C
  toruslife

  # Print the first generation only
  toruslife --once -W 20 -H 10

  # Run a centred glider for 100 generations on a 20x20 torus
  toruslife -W 20 -H 20 --pattern Glider --generations 100

  # Slow checkerboard without clearing the screen between frames
  toruslife --seed checkerboard --delay 0.5 --no-clear
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-W", "--width", type=int, default=Universe.REFERENCE_SIZE, help="Grid width (default: 64)"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=Universe.REFERENCE_SIZE, help="Grid height (default: 64)"
    )

    parser.add_argument(
        "--seed",
        type=str,
        default="reference",
        choices=list(SEED_RULES),
        help="Initial seed rule (default: reference)",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a named pattern instead of a seed rule",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        help="Row offset for pattern placement (default: centred)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        help="Column offset for pattern placement (default: centred)",
    )

    # Animation configuration
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=0,
        help="Number of generations to animate, 0 for no limit (default: 0)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.01,
        help="Seconds to wait between frames (default: 0.01)",
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the initial generation and exit",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between frames",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be zero or positive")

    if args.delay < 0:
        errors.append("Delay must be zero or positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    cli = CLIUniverse()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        universe = cli.run(RunConfig.from_args(args))
    except InvalidDimension as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        print("Use --list-patterns to see available patterns")
        return 1

    logger.debug("Stopped at generation %d", universe.generation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
