#!/usr/bin/env python3
"""
Basic usage examples for SeqStream.
"""

import logging
import operator
from seqstream import (
    reverse, map, filter, remove, take, drop, foldl, foldr,
    to_stream, from_stream, map_stream, filter_stream, remove_stream,
    pmap, Pipeline,
)


def is_even(i):
    return i % 2 == 0


def is_odd(i):
    return i % 2 != 0


def double(i):
    return i * 2


def example_sequences(data):
    """Example: list-based operations."""
    print("\n=== Sequence Example ===")
    
    print("array reverse", reverse(data))
    print("array filter < 5", filter(lambda i: i < 5, data))
    print("array filter even", filter(is_even, data))
    print("array remove even", remove(is_even, data))
    print("array take 3", take(3, data))
    print("array drop 3", drop(3, data))
    print("array map double", map(double, data))


def example_streams(data):
    """Example: one worker thread per stage."""
    print("\n=== Stream Example ===")
    
    print("to/from channel", from_stream(to_stream(data)))
    print("channel map double", from_stream(map_stream(double, to_stream(data))))
    print("channel filter odd", from_stream(filter_stream(is_odd, to_stream(data))))
    print("channel remove odd", from_stream(remove_stream(is_odd, to_stream(data))))
    
    squares_of_odds = Pipeline(data).filter(is_odd).map(lambda i: i * i).collect()
    print("pipeline squares of odd", squares_of_odds)


def example_parallel(data):
    """Example: fan-out map."""
    print("\n=== Parallel Example ===")
    
    print("array parallel map double", pmap(double, data))


def example_folds(data):
    """Example: left and right folds."""
    print("\n=== Fold Example ===")
    
    print("array foldl sum", foldl(operator.add, 0, data))
    print("array foldl sub", foldl(operator.sub, 0, data))
    print("array foldl mult", foldl(operator.mul, 1, data))
    print("array foldr sum", foldr(operator.add, 0, data))
    print("array foldr sub", foldr(operator.sub, 0, data))
    print("array foldr mult", foldr(operator.mul, 1, data))


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.WARNING)
    
    data = list(range(1, 11))
    print("SeqStream Examples")
    print("=" * 50)
    print("dataset", data)
    
    example_sequences(data)
    example_streams(data)
    example_parallel(data)
    example_folds(data)
    
    print("\n" + "=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    main()
