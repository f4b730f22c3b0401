"""
Example 05: Sort, Dedup and Min/Max

sorted() orders a list and itertools.groupby() drops consecutive repeats.
min_max() finds both ends in one pass and raises EmptyInputError instead
of crashing on empty input.
"""

from itertools import groupby

from fahr_to_celc.exceptions import EmptyInputError
from fahr_to_celc.stats import min_max


def dedup(values):
    """Generator that drops consecutive duplicates."""
    for key, _ in groupby(values):
        yield key


if __name__ == "__main__":
    data = [1, 4, 2, 3, 3, 2, 5, 1]
    print(f"data = {data}")

    print("\nSorting and removing duplicates:")
    p = list(dedup(sorted(data)))
    print(f"  data = {p}")

    print("\nFinding min and max values:")
    lowest, highest = min_max(p)
    print(f"  min = {lowest}, max = {highest}")

    print("\nMin and max of an empty list:")
    try:
        min_max([])
    except EmptyInputError as e:
        print(f"  Caught EmptyInputError: {e}")

    print("\n✅ Errors are values you can handle - no need to abort the program!")
