"""Leading-digit frequency tally for Benford's Law checks."""

from types import MappingProxyType
from typing import Iterable, Mapping

DIGITS = range(1, 10)

DigitFrequencyTable = Mapping[int, int]


def leading_digit(value: int) -> int:
    """
    Return the first decimal digit of a positive integer.

    Examples:
        7 -> 7
        42 -> 4
        900 -> 9
        123456 -> 1
    """
    if value <= 0:
        raise ValueError(f"Leading digit is only defined for positive values, got: {value}")
    return int(str(value)[0])


def compute_leading_digit_frequencies(values: Iterable[int]) -> DigitFrequencyTable:
    """
    Count how often each digit 1-9 leads the given values.

    Zero and negative values are skipped. All nine digits are always
    present in the result, in ascending order.

    Args:
        values: Integers to tally

    Returns:
        Read-only mapping of digit -> count
    """
    counts = {digit: 0 for digit in DIGITS}
    for value in values:
        if value > 0:
            counts[leading_digit(value)] += 1
    return MappingProxyType(counts)
