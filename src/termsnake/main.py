# main.py
import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_COLS, DEFAULT_ROWS, Backend, Boundary, Config
from .errors import InputSourceError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in the terminal.")
    parser.add_argument("--backend", choices=[b.value for b in Backend], default=Backend.TERMINAL.value,
                        help="terminal (curses) or window (pygame)")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument("--walls", action="store_true",
                        help="leaving the arena ends the game instead of wrapping around")
    parser.add_argument("--debug", action="store_true",
                        help="start with a long debug snake and show the debug line")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="window backend grid width")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="window backend grid height")
    parser.add_argument("--log-file", default=None, help="write logs here (the terminal is in use)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    if args.cols < 1 or args.rows < 2:
        parser.error("--cols must be >= 1 and --rows >= 2")

    return Config(
        seed=args.seed,
        boundary=Boundary.WALL if args.walls else Boundary.WRAP,
        backend=Backend(args.backend),
        debug=args.debug,
        window_grid=(args.cols, args.rows),
        log_file=args.log_file,
        log_level=args.log_level,
    )


def setup_logging(config: Config) -> None:
    # Without a log file records stay on the package NullHandler; stderr belongs to curses.
    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=getattr(logging, config.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    setup_logging(config)
    logger.info("Starting with %s", config)

    try:
        if config.backend is Backend.WINDOW:
            from .window import play_window
            score = play_window(config)
        else:
            from .terminal import play_terminal
            score = play_terminal(config)
    except InputSourceError as exc:
        logger.error("Aborting: %s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        # e.g. a terminal too small to hold the status row and one playable row
        logger.error("Cannot start: %s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
