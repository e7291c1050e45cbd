"""
Single-producer/single-consumer rendezvous channel.
"""

import itertools
import logging
import threading
from typing import Generic, Iterator, Optional, TypeVar

from seqstream.exceptions import ChannelClosedError, StageError

T = TypeVar('T')

logger = logging.getLogger(__name__)

_channel_ids = itertools.count(1)


class Channel(Generic[T]):
    """
    An unbuffered stream of elements with an explicit close signal.
    
    ``put`` hands one element to the consumer and returns only once the
    consumer has taken it. ``close`` is the only end-of-stream signal: it is
    a state flag, not a value carried through the slot, so any element
    (including ``None``) can travel through the channel.
    
    A channel has exactly one producer and one consumer. Reads are
    destructive: each element is delivered exactly once. A consumer that
    gives up closes the channel, which makes a pending ``put`` raise
    ``ChannelClosedError``.
    """
    
    def __init__(self, name: Optional[str] = None):
        self._name = name or f"channel-{next(_channel_ids)}"
        self._cond = threading.Condition()
        self._item: Optional[T] = None
        self._has_item = False
        self._sent = 0
        self._received = 0
        self._closed = False
        self._error: Optional[BaseException] = None
        self._failed_stage: Optional[str] = None
    
    @property
    def name(self) -> str:
        return self._name
    
    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed
    
    @property
    def failed(self) -> bool:
        """True if the producer closed the channel because it failed."""
        with self._cond:
            return self._failed_stage is not None
    
    def put(self, item: T) -> None:
        """
        Send ``item`` and block until the consumer has received it.
        
        Raises:
            ChannelClosedError: If the channel is closed before the element
                is received
        """
        with self._cond:
            self._cond.wait_for(lambda: not self._has_item or self._closed)
            if self._closed:
                raise ChannelClosedError(f"send on closed channel {self._name!r}")
            
            self._item = item
            self._has_item = True
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            
            # Rendezvous: wait for the consumer to take this element
            self._cond.wait_for(lambda: self._received >= ticket or self._closed)
            if self._received < ticket:
                # The consumer closed the channel instead of reading
                self._item = None
                self._has_item = False
                raise ChannelClosedError(f"channel {self._name!r} closed before the element was received")
    
    def get(self) -> T:
        """
        Receive the next element, blocking until one arrives or the channel closes.
        
        Raises:
            ChannelClosedError: Channel closed and fully drained
            StageError: Channel closed because its producer failed
        """
        with self._cond:
            self._cond.wait_for(lambda: self._has_item or self._closed)
            if self._has_item:
                item = self._item
                self._item = None
                self._has_item = False
                self._received += 1
                self._cond.notify_all()
                return item
            
            if self._failed_stage is not None:
                raise StageError(self._failed_stage) from self._error
            raise ChannelClosedError(f"channel {self._name!r} is closed")
    
    def close(self, error: Optional[BaseException] = None, stage: Optional[str] = None) -> None:
        """
        Close the channel. Idempotent; only the first call has any effect.
        
        Args:
            error: Exception that made the producer give up, if any
            stage: Name of the failing stage, defaults to the channel name
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
            if error is not None or stage is not None:
                self._error = error
                self._failed_stage = stage or self._name
            self._cond.notify_all()
        
        logger.debug(f"Channel {self._name} closed after {self._sent} elements"
                     f"{' with error' if error is not None else ''}")
    
    def __iter__(self) -> Iterator[T]:
        """Drain the channel until it is closed."""
        while True:
            try:
                yield self.get()
            except ChannelClosedError:
                return
    
    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Channel({self._name!r}, {state})"
