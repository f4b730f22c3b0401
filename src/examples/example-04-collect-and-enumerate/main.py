"""
Example 04: Collecting and Enumerating

Consumers like list() pull every value out of an iterator.
enumerate() pairs each value with its index.
"""


if __name__ == "__main__":
    print("Collecting a range into a list:")
    v = list(range(1, 11))
    print(f"  v = {v}")

    print("\nIterating over the list directly (preferred):")
    for n in v:
        print(f"  n = {n:2}")

    print("\nIndex-based loop (works, but not idiomatic):")
    for i in range(len(v)):
        print(f"  v[{i}] = {v[i]:2}")

    print("\nenumerate() yields (index, value) tuples:")
    for i, n in enumerate(v):
        print(f"  v[{i}] = {n:2}")

    print("\n✅ Use enumerate() when you need the index too!")
