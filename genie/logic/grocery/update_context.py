"""Single-writer update context.

Shared grocery state is only touched from jobs run by an UpdateContext:
jobs execute one at a time, in the order they were posted, under a
re-entrant lock. A job posted while another is running (from any thread,
or from inside the running job) waits its turn, so readers never observe
a half-applied change.
"""
import logging
from collections import deque
from threading import RLock
from typing import Callable, Deque, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Job = Callable[[], None]


class UpdateContext:
    def __init__(self, name: str = "main"):
        self.name = name
        self._lock = RLock()
        self._pending: Deque[Job] = deque()
        self._draining = False

    def post(self, job: Job) -> None:
        """Schedule job; it runs before post returns unless a drain is already underway."""
        with self._lock:
            self._pending.append(job)
            if not self._draining:
                self._drain()

    def call(self, fn: Callable[[], T]) -> T:
        """Run fn in the context after all previously posted jobs, returning its result."""
        with self._lock:
            if not self._draining:
                self._drain()
            return fn()

    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def _drain(self):
        # A failing job does not strand the jobs queued behind it; the first
        # failure is re-raised once the queue is empty.
        self._draining = True
        first_error = None
        try:
            while self._pending:
                job = self._pending.popleft()
                try:
                    job()
                except Exception as e:
                    logger.exception(f"Job failed in update context '{self.name}'")
                    if first_error is None:
                        first_error = e
        finally:
            self._draining = False
        if first_error is not None:
            raise first_error
