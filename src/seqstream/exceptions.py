"""Exceptions raised by SeqStream."""

from typing import Optional


class SeqStreamError(Exception):
    """Base class for all SeqStream errors."""


class ChannelClosedError(SeqStreamError):
    """Raised when reading from a drained channel or writing to a closed one."""


class StageError(SeqStreamError):
    """A producer or stage worker failed while relaying a stream.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, stage: Optional[str], message: Optional[str] = None):
        self.stage = stage
        super().__init__(message or f"stream stage {stage!r} failed")
