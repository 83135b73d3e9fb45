"""
Command-line entrypoint.

Starts the interactive calculator on the terminal.

Examples
--------
terminal-calculator
terminal-calculator --log-level debug
"""

import argparse
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from terminal_calculator.common.config import CalculatorSettings, LogLevel
from terminal_calculator.common.logger import configure_logging
from terminal_calculator.repl.session import CalculatorSession


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    log_level : LogLevel
        Level of the package logger.
    """

    log_level: LogLevel = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Argument list, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="terminal-calculator",
        description="Simple terminal calculator for 'lhs operator rhs' expressions",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the interactive calculator.

    :param argv: Argument list, defaults to sys.argv[1:]
    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    settings = CalculatorSettings(log_level=cli_args.log_level)
    configure_logging(settings.log_level)

    CalculatorSession(settings=settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
