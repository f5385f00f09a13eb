#!/usr/bin/env python3
"""
Basic usage examples for lq.
"""

import lq
from lq import FlatMapNonePolicy, LqConfig, from_, values


def example_filtering(numbers):
    """Example: Filter with the fluent API."""
    print("\n=== Even numbers ===")
    from_(numbers) \
        .filter(lambda n: n % 2 == 0) \
        .for_each(print)

    print("\n=== Numbers greater than 5 ===")
    from_(numbers) \
        .filter(lambda n: n > 5) \
        .for_each(print)

    print("\n=== Even numbers times 2 ===")
    from_(numbers) \
        .filter(lambda n: n % 2 == 0) \
        .map(lambda n: n * 2) \
        .for_each(print)

    print("\n=== Even numbers as a list ===")
    evens = from_(numbers).filter(lambda n: n % 2 == 0).to_list()
    print(evens)


def example_flat_map(numbers):
    """Example: Expand each element into several."""
    print("\n=== FlatMap: expand each number into multiples ===")
    from_(numbers) \
        .filter(lambda n: n <= 5) \
        .flat_map(lambda n: values([n, n * 2, n * 3])) \
        .for_each(print)

    print("\n=== FlatMap: each even number and its two successors ===")
    from_(numbers) \
        .filter(lambda n: n % 2 == 0) \
        .flat_map(lambda n: values([n, n + 1, n + 2])) \
        .for_each(print)


def example_reduce(numbers):
    """Example: Fold a sequence into one value."""
    print("\n=== Reduce ===")

    total = from_(numbers).reduce(0, lambda acc, n: acc + n)
    print(f"Sum: {total}")

    product = from_(numbers) \
        .filter(lambda n: n % 2 == 0) \
        .reduce(1, lambda acc, n: acc * n)
    print(f"Product of evens: {product}")

    maximum = from_(numbers).reduce(0, lambda acc, n: n if n > acc else acc)
    print(f"Maximum: {maximum}")

    count = from_(numbers).reduce(0, lambda acc, n: acc + 1)
    print(f"Element count: {count}")

    def join(acc, n):
        if acc == "":
            return str(n)
        return f"{acc}-{n}"

    print(f"Joined: {lq.reduce_to(numbers, '', join)}")


def example_free_functions(numbers):
    """Example: Use the combinators without the wrapper."""
    print("\n=== Filter used directly ===")
    for value in lq.filter(numbers, lambda n: n % 2 == 0):
        print(value)


def main():
    """Run all examples."""
    print("=== lq Examples ===")

    LqConfig.set_defaults(flat_map_none_policy=FlatMapNonePolicy.RAISE)

    numbers = values([2, 3, 4, 5, 6, 7, 8, 9, 10])

    example_filtering(numbers)
    example_flat_map(numbers)
    example_reduce(numbers)
    example_free_functions(numbers)

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
