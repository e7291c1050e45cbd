"""
Pure transformations over finite sequences.

Every function returns a new list and leaves its input untouched. Evaluation
is sequential and strictly in index order; see ``seqstream.parallel.pmap`` for
the concurrent map.
"""

from typing import Callable, Iterable, List, TypeVar

T = TypeVar('T')
U = TypeVar('U')

__all__ = ["reverse", "map", "filter", "remove", "take", "drop", "foldl", "foldr"]


def reverse(seq: Iterable[T]) -> List[T]:
    """Return a reversed copy of ``seq``."""
    items = list(seq)
    items.reverse()
    return items


def map(func: Callable[[T], U], seq: Iterable[T]) -> List[U]:
    """Apply ``func`` to each element, in order."""
    return [func(item) for item in seq]


def filter(predicate: Callable[[T], bool], seq: Iterable[T]) -> List[T]:
    """Keep only elements matching ``predicate``."""
    return [item for item in seq if predicate(item)]


def remove(predicate: Callable[[T], bool], seq: Iterable[T]) -> List[T]:
    """Drop elements matching ``predicate``; the complement of :func:`filter`."""
    return [item for item in seq if not predicate(item)]


def take(n: int, seq: Iterable[T]) -> List[T]:
    """Take the first ``n`` elements. ``n <= 0`` yields an empty list."""
    result = []
    if n <= 0:
        return result
    
    for item in seq:
        result.append(item)
        if len(result) >= n:
            break
    return result


def drop(n: int, seq: Iterable[T]) -> List[T]:
    """Skip the first ``n`` elements and return the rest."""
    return [item for i, item in enumerate(seq) if i >= n]


def foldl(func: Callable[[U, T], U], initial: U, seq: Iterable[T]) -> U:
    """
    Left fold: ``func(...func(func(initial, s[0]), s[1])..., s[-1])``.
    
    Args:
        func: Step function taking ``(accumulator, element)``
        initial: Starting accumulator, returned unchanged for empty input
        seq: Elements to fold
        
    Returns:
        Final accumulator
    """
    result = initial
    for item in seq:
        result = func(result, item)
    return result


def foldr(func: Callable[[T, U], U], initial: U, seq: Iterable[T]) -> U:
    """
    Right fold: ``func(s[0], func(s[1], ...func(s[-1], initial)))``.
    
    Note the step takes ``(element, accumulator)``, the reverse of
    :func:`foldl`. Evaluated iteratively from the last element backwards.
    """
    result = initial
    for item in reverse(seq):
        result = func(item, result)
    return result
