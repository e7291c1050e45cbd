"""Counting barrier for joining a fan-out of workers."""

import threading


class WaitGroup:
    """
    Wait for a collection of workers to finish.
    
    The owner calls :meth:`add` with the number of workers, each worker calls
    :meth:`done` when it finishes, and :meth:`wait` blocks until the counter
    drops back to zero.
    """
    
    def __init__(self):
        self._count = 0
        self._cond = threading.Condition()
    
    @property
    def count(self) -> int:
        with self._cond:
            return self._count
    
    def add(self, delta: int = 1) -> None:
        with self._cond:
            count = self._count + delta
            if count < 0:
                raise ValueError("negative WaitGroup counter")
            self._count = count
            if count == 0:
                self._cond.notify_all()
    
    def done(self) -> None:
        self.add(-1)
    
    def wait(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)
