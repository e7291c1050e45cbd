"""
Configuration management for SeqStream operations.
"""

import os
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum
import psutil


class FanOutStrategy(Enum):
    """Strategy for spreading a parallel map over workers."""
    PER_ELEMENT = "per_element"
    BOUNDED = "bounded"
    ADAPTIVE = "adaptive"


def _default_max_workers() -> int:
    cpus = psutil.cpu_count(logical=True) or os.cpu_count() or 1
    return min(32, cpus * 4)


@dataclass
class SeqStreamConfig:
    """Global configuration for SeqStream operations."""
    
    # Parallel map
    fanout_strategy: FanOutStrategy = FanOutStrategy.ADAPTIVE
    per_element_limit: int = 256  # Largest input that still gets one thread per element
    max_workers: int = field(default_factory=_default_max_workers)
    memory_pressure_percent: float = 90.0
    
    # Threads
    daemon_threads: bool = True
    thread_name_prefix: str = "seqstream"
    
    _instance: Optional['SeqStreamConfig'] = None
    
    def __post_init__(self):
        """Validate numeric settings."""
        self.fanout_strategy = FanOutStrategy(self.fanout_strategy)
        if self.per_element_limit < 0:
            raise ValueError(f"per_element_limit must be >= 0, got {self.per_element_limit}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
    
    @classmethod
    def get_instance(cls) -> 'SeqStreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        previous = {key: getattr(instance, key) for key in kwargs if hasattr(instance, key)}
        for key in previous:
            setattr(instance, key, kwargs[key])

        try:
            instance.__post_init__()
        except ValueError:
            for key, value in previous.items():
                setattr(instance, key, value)
            raise
    
    def resolve_strategy(self, total_size: int,
                         strategy: Optional[FanOutStrategy] = None) -> FanOutStrategy:
        """Pick the concrete fan-out strategy for a sequence of ``total_size`` items."""
        strategy = FanOutStrategy(strategy or self.fanout_strategy)
        if strategy != FanOutStrategy.ADAPTIVE:
            return strategy
        
        if total_size > self.per_element_limit:
            return FanOutStrategy.BOUNDED
        
        # Every thread reserves a stack, so stop spawning per element when memory is tight
        if psutil.virtual_memory().percent > self.memory_pressure_percent:
            return FanOutStrategy.BOUNDED
        
        return FanOutStrategy.PER_ELEMENT
    
    def resolve_workers(self, total_size: int) -> int:
        """Size of a bounded pool for ``total_size`` items."""
        return max(1, min(total_size, self.max_workers))
    
    def thread_name(self, role: str) -> str:
        return f"{self.thread_name_prefix}-{role}"


# Global configuration instance
config = SeqStreamConfig.get_instance()
