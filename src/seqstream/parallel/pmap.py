"""
Parallel map: one unit of work per element, joined on a barrier.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from seqstream.config import config, FanOutStrategy
from seqstream.parallel.waitgroup import WaitGroup

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


def pmap(
    func: Callable[[T], U],
    seq: Iterable[T],
    strategy: Optional[Union[FanOutStrategy, str]] = None,
    max_workers: Optional[int] = None
) -> List[U]:
    """
    Apply ``func`` to every element concurrently.
    
    ``result[i]`` is always ``func(seq[i])``, whatever order the workers
    finish in. The call returns only once every element has been processed.
    
    Args:
        func: Function applied to each element
        seq: Finite input sequence
        strategy: Fan-out strategy (None uses the configured default)
        max_workers: Pool size for the bounded strategy
        
    Returns:
        List of results, index-aligned with ``seq``
        
    Raises:
        BaseException: Whatever the lowest-indexed failing call raised,
            re-raised after all workers have finished
    """
    items = list(seq)
    n = len(items)
    if n == 0:
        return []
    
    strategy = config.resolve_strategy(n, strategy)
    results: List[Optional[U]] = [None] * n
    errors: List[Optional[BaseException]] = [None] * n
    barrier = WaitGroup()
    barrier.add(n)
    
    def worker(index: int, item: T) -> None:
        try:
            results[index] = func(item)
        except BaseException as exc:
            errors[index] = exc
        finally:
            barrier.done()
    
    if strategy == FanOutStrategy.PER_ELEMENT:
        logger.debug(f"pmap: spawning {n} workers")
        for index, item in enumerate(items):
            threading.Thread(
                target=worker,
                args=(index, item),
                name=config.thread_name(f"pmap-{index}"),
                daemon=config.daemon_threads,
            ).start()
        barrier.wait()
    else:
        workers = max_workers or config.resolve_workers(n)
        logger.debug(f"pmap: {n} items over a pool of {workers} workers")
        with ThreadPoolExecutor(max_workers=workers,
                                thread_name_prefix=config.thread_name("pmap")) as pool:
            for index, item in enumerate(items):
                pool.submit(worker, index, item)
            barrier.wait()
    
    for exc in errors:
        if exc is not None:
            raise exc
    
    return results
