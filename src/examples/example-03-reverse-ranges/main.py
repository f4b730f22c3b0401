"""
Example 03: Reversing Ranges

reversed() walks a range backwards without building a list,
and combines with filters like any other iterator.
"""


if __name__ == "__main__":
    print("Reverse inclusive range:")
    for i in reversed(range(1, 11)):
        print(f"  i = {i:2}")

    print("\nReverse range with a filter (multiples of 3):")
    for i in filter(lambda x: x % 3 == 0, reversed(range(-10, 11))):
        print(f"  i = {i:3}")

    print("\n✅ reversed(range(...)) is as lazy as range(...) itself!")
