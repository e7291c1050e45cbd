"""Channel-based streaming with one worker thread per stage."""

from seqstream.streams.channel import Channel
from seqstream.streams.adapters import to_stream, from_stream
from seqstream.streams.operators import (
    StageOperator,
    MapOperator,
    FilterOperator,
    RemoveOperator,
)
from seqstream.streams.stages import (
    StageState,
    StageWorker,
    start_stage,
    map_stream,
    filter_stream,
    remove_stream,
)
from seqstream.streams.pipeline import Pipeline

__all__ = [
    "Channel",
    "to_stream",
    "from_stream",
    "StageOperator",
    "MapOperator",
    "FilterOperator",
    "RemoveOperator",
    "StageState",
    "StageWorker",
    "start_stage",
    "map_stream",
    "filter_stream",
    "remove_stream",
    "Pipeline",
]
