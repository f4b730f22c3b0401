"""
Example 06: A Custom Infinite Iterator

FahrToCelc keeps its own state and implements __iter__() and __next__().
It never raises StopIteration, so the caller decides when to stop.
"""

from itertools import islice

from fahr_to_celc.sequence import FahrToCelc


if __name__ == "__main__":
    print("First 5 values from 0 F in steps of 5 F:")
    for fahr, celc in islice(FahrToCelc(0.0, 5.0), 5):
        print(f"  F = {fahr:6.2f}; C = {celc:6.2f}")

    print("\nPulling values one at a time with next():")
    seq = FahrToCelc(212.0, -45.0)
    for _ in range(3):
        fahr, celc = next(seq)
        print(f"  F = {fahr:6.2f}; C = {celc:6.2f}")
    print(f"  (next Fahrenheit value will be {seq.current})")

    print("\n✅ Custom iterators are just objects with __next__()!")
    print("   (Never call list() on an infinite one - it will run forever!)")
