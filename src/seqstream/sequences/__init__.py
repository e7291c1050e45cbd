"""Sequential transformations over finite sequences."""

from seqstream.sequences.ops import (
    reverse,
    map,
    filter,
    remove,
    take,
    drop,
    foldl,
    foldr,
)

__all__ = [
    "reverse",
    "map",
    "filter",
    "remove",
    "take",
    "drop",
    "foldl",
    "foldr",
]
