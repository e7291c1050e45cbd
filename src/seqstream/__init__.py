"""
SeqStream: higher-order sequence functions with sequential, streaming and
parallel execution.

The same transformation can run over an in-memory list (``map``), through a
chain of channel-connected worker threads (``map_stream``), or fanned out
with one worker per element (``pmap``).
"""

from seqstream.config import SeqStreamConfig, FanOutStrategy
from seqstream.exceptions import SeqStreamError, ChannelClosedError, StageError
from seqstream.sequences import (
    reverse, map, filter, remove, take, drop, foldl, foldr
)
from seqstream.streams import (
    Channel,
    to_stream,
    from_stream,
    map_stream,
    filter_stream,
    remove_stream,
    StageState,
    StageWorker,
    Pipeline,
)
from seqstream.parallel import WaitGroup, pmap

__version__ = "0.1.0"
__author__ = "SeqStream Contributors"
__license__ = "Apache-2.0"

__all__ = [
    "SeqStreamConfig",
    "FanOutStrategy",
    "SeqStreamError",
    "ChannelClosedError",
    "StageError",
    "reverse",
    "map",
    "filter",
    "remove",
    "take",
    "drop",
    "foldl",
    "foldr",
    "Channel",
    "to_stream",
    "from_stream",
    "map_stream",
    "filter_stream",
    "remove_stream",
    "StageState",
    "StageWorker",
    "Pipeline",
    "WaitGroup",
    "pmap",
]

# Configure default settings
SeqStreamConfig.set_defaults()
