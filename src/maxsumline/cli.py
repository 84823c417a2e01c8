import argparse
import logging
import traceback
from typing import List, Optional

from maxsumline import config
from maxsumline.core import analyzer
from maxsumline.logging_setup import configure_logging
from maxsumline.models import AnalysisResult
from maxsumline.utils.text import join_numbers


LOGGER = logging.getLogger(__name__)
PROMPT = "Please enter a path string: "


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Find the lines of a text file whose comma-separated numbers have "
            "the maximum sum, and the lines that contain invalid numbers."
        )
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Absolute path to the input text file (prompted for when omitted).",
    )
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        choices=config.LOG_LEVELS,
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    path = args.path if args.path is not None else prompt_path()

    try:
        result = analyzer.parse(path)
    except Exception as exc:
        LOGGER.debug("Analysis failed for %r", path)
        print_error(exc)
        return 1

    print_result(result)
    return 0


def prompt_path() -> str:
    try:
        return input(PROMPT)
    except EOFError:
        return ""


def print_result(result: AnalysisResult) -> None:
    if not result.any_valid_line and not result.any_invalid_line:
        print("No results to display.")
        return

    if result.any_valid_line:
        print(f"Lines with max sum of elements: {join_numbers(result.lines_with_max_sum)}")
    if result.any_invalid_line:
        print(f"Invalid lines: {join_numbers(result.invalid_lines)}")


def print_error(exc: BaseException) -> None:
    print("An error occurred during current operation:")
    print(f"  - {exc}")
    print("Stack Trace")
    print("".join(traceback.format_tb(exc.__traceback__)), end="")

    cause = exc.__cause__
    if cause is not None:
        print()
        print("Inner exception:")
        print(f"  - {cause}")
        print("Inner exception Stack Trace:")
        print("".join(traceback.format_tb(cause.__traceback__)), end="")


if __name__ == "__main__":
    raise SystemExit(main())
