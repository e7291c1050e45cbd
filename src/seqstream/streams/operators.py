"""
Element-wise steps run by stream stages.

An operator turns the iterator of elements read from a stage's source into
the iterator of elements the stage writes to its sink. It holds no thread or
channel of its own, so the same operator describes a step of a ``Pipeline``
before any worker exists.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator


class StageOperator(ABC):
    """One element-wise step of a stream pipeline."""

    kind = "stage"

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    @abstractmethod
    def apply(self, elements: Iterator[Any]) -> Iterator[Any]:
        """Yield the outputs for ``elements``, in order."""

    def __repr__(self) -> str:
        func_name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{type(self).__name__}({func_name})"


class MapOperator(StageOperator):
    """Relay ``func(element)`` for every element."""

    kind = "map"

    def apply(self, elements: Iterator[Any]) -> Iterator[Any]:
        func = self.func
        return (func(element) for element in elements)


class FilterOperator(StageOperator):
    """Relay the elements whose predicate outcome equals ``keep``."""

    kind = "filter"
    keep = True

    def apply(self, elements: Iterator[Any]) -> Iterator[Any]:
        predicate, keep = self.func, self.keep
        return (element for element in elements if bool(predicate(element)) is keep)


class RemoveOperator(FilterOperator):
    """Relay the elements the predicate rejects."""

    kind = "remove"
    keep = False
