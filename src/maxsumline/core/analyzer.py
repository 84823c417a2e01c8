import logging
from decimal import Context, Decimal
from typing import Dict, Iterable, List, Optional

from maxsumline import config
from maxsumline.core.ingest import read_numbered_lines
from maxsumline.models import AnalysisResult, NumberedLines
from maxsumline.utils.numbers import is_decimal, parse_decimal, split_tokens


LOGGER = logging.getLogger(__name__)
_SUM_CONTEXT = Context(prec=config.SUM_PRECISION)


def parse(path: str) -> AnalysisResult:
    """Analyze the file at ``path``.

    Returns an empty result when the file has no lines or only blank lines.
    Path and file errors from ingestion are raised unchanged.
    """
    lines = read_numbered_lines(path)

    if not lines or all(not text.strip() for text in lines.values()):
        LOGGER.info("No content to analyze in %s", path)
        return AnalysisResult.empty()

    invalid_line_numbers = get_invalid_line_numbers(lines)
    # Blank lines are valid but never compete for the max sum.
    blank_line_numbers = [
        line_number for line_number, text in lines.items() if not split_tokens(text)
    ]
    max_sum_line_numbers = get_max_sum_line_numbers(
        lines, invalid_line_numbers + blank_line_numbers
    )

    result = AnalysisResult.create(max_sum_line_numbers, invalid_line_numbers)
    LOGGER.info(
        "Lines analyzed: %d, invalid: %d, with max sum: %d",
        len(lines),
        len(result.invalid_lines),
        len(result.lines_with_max_sum),
    )
    LOGGER.debug("Analysis result: %s", result.to_dict())
    return result


def is_line_invalid(line: str) -> bool:
    return any(not is_decimal(token) for token in split_tokens(line))


def line_sum(line: str) -> Decimal:
    total = Decimal(0)
    for token in split_tokens(line):
        value = parse_decimal(token)
        if value is None:
            raise ValueError(f"Token is not a decimal number: {token!r}")
        total = _SUM_CONTEXT.add(total, value)
    return total


def get_invalid_line_numbers(lines: NumberedLines) -> List[int]:
    return sorted(
        line_number for line_number, text in lines.items() if is_line_invalid(text)
    )


def get_max_sum_line_numbers(
    lines: NumberedLines,
    exclude_line_numbers: Optional[Iterable[int]] = None,
) -> List[int]:
    excluded = set(exclude_line_numbers or ())
    sums: Dict[int, Decimal] = {}
    for line_number, text in lines.items():
        if line_number in excluded or is_line_invalid(text):
            continue
        sums[line_number] = line_sum(text)

    if not sums:
        return []

    max_sum = max(sums.values())
    LOGGER.debug("Max line sum: %s", max_sum)
    return sorted(line_number for line_number, total in sums.items() if total == max_sum)
