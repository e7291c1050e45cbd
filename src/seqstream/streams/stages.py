"""
Concurrent stream stages: one worker thread per stage.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Iterator, Optional, TypeVar

from seqstream.config import config
from seqstream.exceptions import ChannelClosedError, StageError
from seqstream.streams.channel import Channel
from seqstream.streams.operators import (
    StageOperator, MapOperator, FilterOperator, RemoveOperator
)

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class StageState(Enum):
    """Lifecycle of a stage worker."""
    OPEN = "open"          # Relaying elements
    CLOSING = "closing"    # Input closure (or a failure) observed
    CLOSED = "closed"      # Output closed, worker finished


class StageWorker(threading.Thread):
    """
    Relay a source channel into a sink channel through an operator.
    
    The worker owns the sink: it is the sink's only producer and closes it
    exactly once, when the source is exhausted. If the operator raises, or
    the source reports an upstream failure, the sink is closed with that
    error so the failure reaches whoever drains the end of the pipeline, and
    the source is closed so the stage feeding it stops as well. A stage whose
    consumer has closed the sink shuts down quietly the same way.
    """
    
    def __init__(self, operator: StageOperator, source: Channel, sink: Optional[Channel] = None):
        self.operator = operator
        self.source = source
        self.sink = sink if sink is not None else Channel(f"{source.name}.{operator.kind}")
        super().__init__(
            name=config.thread_name(f"{operator.kind}-{self.sink.name}"),
            daemon=config.daemon_threads,
        )
        self._state = StageState.OPEN
        self._state_lock = threading.Lock()
        self._upstream_error: Optional[StageError] = None
    
    @property
    def state(self) -> StageState:
        with self._state_lock:
            return self._state
    
    def _transition(self, new_state: StageState) -> None:
        with self._state_lock:
            old_state = self._state
            self._state = new_state
        logger.debug(f"Stage {self.name}: {old_state.name} -> {new_state.name}")
    
    def _receive(self) -> Iterator:
        """Read the source until it closes, remembering an upstream failure."""
        while True:
            try:
                item = self.source.get()
            except ChannelClosedError:
                return
            except StageError as exc:
                self._upstream_error = exc
                raise
            yield item
    
    def _fail(self, exc: BaseException) -> None:
        if exc is self._upstream_error:
            # Upstream failed; pass the original failure along unchanged
            self.sink.close(error=exc.__cause__, stage=exc.stage)
        elif isinstance(exc, ChannelClosedError) and self.sink.closed:
            logger.debug(f"Stage {self.name}: consumer stopped reading, shutting down")
            self.source.close()
        else:
            logger.error(f"Stage {self.name} failed", exc_info=exc)
            self.sink.close(error=exc, stage=self.name)
            # Unblock the upstream producer; nothing will read from it again
            self.source.close()
    
    def run(self) -> None:
        logger.debug(f"Stage {self.name} relaying {self.source.name} -> {self.sink.name}")
        try:
            for item in self.operator.apply(self._receive()):
                self.sink.put(item)
        except BaseException as exc:
            self._transition(StageState.CLOSING)
            self._fail(exc)
            if not isinstance(exc, Exception):
                raise
        else:
            self._transition(StageState.CLOSING)
        finally:
            self.sink.close()
            self._transition(StageState.CLOSED)


def start_stage(operator: StageOperator, in_stream: Channel) -> StageWorker:
    """Start a worker relaying ``in_stream`` through ``operator``."""
    worker = StageWorker(operator, in_stream)
    worker.start()
    return worker


def map_stream(func: Callable[[T], U], in_stream: Channel[T]) -> Channel[U]:
    """Apply ``func`` to each element of ``in_stream`` on a dedicated worker."""
    return start_stage(MapOperator(func), in_stream).sink


def filter_stream(predicate: Callable[[T], bool], in_stream: Channel[T]) -> Channel[T]:
    """Relay only elements matching ``predicate``."""
    return start_stage(FilterOperator(predicate), in_stream).sink


def remove_stream(predicate: Callable[[T], bool], in_stream: Channel[T]) -> Channel[T]:
    """Relay only elements not matching ``predicate``."""
    return start_stage(RemoveOperator(predicate), in_stream).sink
