"""
Example 01: Basic Ranges

range() is exclusive on the right. To include the end value,
add one to the stop argument.
"""


if __name__ == "__main__":
    print("Basic range (exclusive on the right):")
    for i in range(1, 11):
        print(f"  i = {i:3}; i*i = {i * i:3}")

    print("\nInclusive range (stop + 1):")
    for i in range(1, 10 + 1):
        print(f"  i = {i:3}; i*i = {i * i:3}")

    print("\n✅ range() objects are lazy - no list is built until you ask for one!")
