"""Concurrent fan-out over finite sequences."""

from seqstream.parallel.waitgroup import WaitGroup
from seqstream.parallel.pmap import pmap

__all__ = [
    "WaitGroup",
    "pmap",
]
