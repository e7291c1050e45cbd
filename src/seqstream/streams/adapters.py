"""
Conversion between finite sequences and channels.
"""

import logging
import threading
from typing import Iterable, List, Optional, TypeVar

from seqstream.config import config
from seqstream.exceptions import ChannelClosedError
from seqstream.streams.channel import Channel

T = TypeVar('T')

logger = logging.getLogger(__name__)


def to_stream(seq: Iterable[T], name: Optional[str] = None) -> Channel[T]:
    """
    Send every element of ``seq`` to a new channel, then close it.
    
    Returns immediately; a single producer thread feeds the channel while the
    caller consumes it. If the consumer closes the channel early the producer
    stops without reporting an error.
    
    Args:
        seq: Elements to send, in order
        name: Optional channel name used in logs and errors
        
    Returns:
        Open channel fed by the producer thread
    """
    out: Channel[T] = Channel(name)
    
    def produce() -> None:
        try:
            for item in seq:
                out.put(item)
        except BaseException as exc:
            if isinstance(exc, ChannelClosedError) and out.closed:
                logger.debug(f"Consumer of {out.name} stopped reading, stopping producer")
                return
            logger.error(f"Producer for {out.name} failed", exc_info=exc)
            out.close(error=exc, stage=out.name)
            if not isinstance(exc, Exception):
                raise
        finally:
            out.close()
    
    producer = threading.Thread(
        target=produce,
        name=config.thread_name(f"producer-{out.name}"),
        daemon=config.daemon_threads,
    )
    producer.start()
    return out


def from_stream(stream: Channel[T]) -> List[T]:
    """
    Read ``stream`` until it is closed and return the elements in arrival order.
    
    A stream that is already closed and drained yields an empty list.
    
    Raises:
        StageError: If a producer or stage upstream failed
    """
    return list(stream)
