"""
Example 02: Ranges with a Step

There are several ways to walk a range in steps: the step argument,
a filter, or itertools.islice.
"""

from itertools import islice


def is_even(x):
    return x % 2 == 0


if __name__ == "__main__":
    print("Range with step argument:")
    for i in range(0, 11, 2):
        print(f"  i = {i:2}")

    print("\nSame with filter() and a predicate (more flexible):")
    for i in filter(is_even, range(11)):
        print(f"  i = {i:3}")

    print("\nSame with a generator expression:")
    for i in (x for x in range(11) if x % 2 == 0):
        print(f"  i = {i:3}")

    print("\nSame using itertools.islice:")
    for i in islice(range(11), 0, None, 2):
        print(f"  i = {i:3}")

    print("\n✅ Pick step for simple strides, filter() when the rule is arbitrary!")
