"""
Fluent builder for chains of stream stages.
"""

from typing import (
    Any, Callable, Iterable, Iterator, List, TypeVar, Union
)

from seqstream.sequences import foldl
from seqstream.streams.adapters import to_stream, from_stream
from seqstream.streams.channel import Channel
from seqstream.streams.operators import (
    StageOperator, MapOperator, FilterOperator, RemoveOperator
)
from seqstream.streams.stages import start_stage

T = TypeVar('T')
U = TypeVar('U')


class Pipeline(Iterable[T]):
    """
    A lazy description of a concurrent stream pipeline.
    
    Nothing runs until :meth:`stream`, :meth:`collect` or iteration; each of
    those starts a fresh producer plus one worker thread per step.
    """
    
    def __init__(self, source: Union[Iterable[T], Callable[[], Iterable[T]]]):
        """
        Initialize pipeline.
        
        Args:
            source: Data source (iterable, or callable returning an iterable)
        """
        if callable(source):
            self._source = source
        elif hasattr(source, '__iter__'):
            self._source = lambda: source
        else:
            raise TypeError("Source must be iterable or callable")
        
        self._operators: List[StageOperator] = []
    
    def _then(self, operator: StageOperator) -> 'Pipeline[Any]':
        new_pipeline = Pipeline(self._source)
        new_pipeline._operators = self._operators.copy()
        new_pipeline._operators.append(operator)
        return new_pipeline
    
    @property
    def stages(self) -> int:
        """Number of stages."""
        return len(self._operators)
    
    def __iter__(self) -> Iterator[T]:
        return iter(self.stream())
    
    # Stages
    
    def map(self, func: Callable[[T], U]) -> 'Pipeline[U]':
        """Apply function to each element."""
        return self._then(MapOperator(func))
    
    def filter(self, predicate: Callable[[T], bool]) -> 'Pipeline[T]':
        """Keep only elements matching predicate."""
        return self._then(FilterOperator(predicate))
    
    def remove(self, predicate: Callable[[T], bool]) -> 'Pipeline[T]':
        """Drop elements matching predicate."""
        return self._then(RemoveOperator(predicate))
    
    # Terminal operators
    
    def stream(self) -> Channel:
        """Start the producer and every stage; return the last channel."""
        channel = to_stream(self._source())
        for op in self._operators:
            channel = start_stage(op, channel).sink
        return channel
    
    def collect(self) -> List[T]:
        """Run the pipeline and collect all elements into a list."""
        return from_stream(self.stream())
    
    def reduce(self, func: Callable[[U, T], U], initial: U) -> U:
        """Run the pipeline and left-fold its output."""
        return foldl(func, initial, self)
    
    def count(self) -> int:
        """Count elements."""
        return sum(1 for _ in self)
    
    # Factory methods
    
    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Pipeline[T]':
        """Create pipeline from iterable."""
        return cls(iterable)
    
    @classmethod
    def range(cls, *args) -> 'Pipeline[int]':
        """Create pipeline of integers."""
        return cls(lambda: range(*args))
