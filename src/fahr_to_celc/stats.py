"""Summary helpers over finite sequences."""

import logging
from typing import Iterable, Tuple, TypeVar

from .exceptions import EmptyInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def min_max(values: Iterable[T]) -> Tuple[T, T]:
    """Find the smallest and largest value in a single pass.

    Args:
        values: Any iterable of mutually comparable values

    Returns:
        Tuple of (min, max)

    Raises:
        EmptyInputError: If ``values`` yields nothing
    """
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyInputError("Could not find min and max values") from None

    lowest = highest = first
    count = 1
    for value in iterator:
        if value < lowest:
            lowest = value
        elif value > highest:
            highest = value
        count += 1

    logger.debug(f"min_max over {count:,} values: min={lowest}, max={highest}")
    return lowest, highest
