"""
Delivery Pool
=============

Fire-and-forget worker pool for outbound email. Submissions never block the
caller: when ``max_pending`` deliveries are already queued or running, the new
one is dropped and logged.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Optional, Set

from utils.logger import get_module_logger


class DeliveryPool:
    """Bounded ThreadPoolExecutor wrapper with a wait-for-outstanding hook."""

    def __init__(self, max_workers: int = 8, max_pending: int = 1000, logger=None):
        self.logger = logger or get_module_logger("Service.Broadcast.DeliveryPool")
        self.max_workers = max(1, int(max_workers))
        self.max_pending = max(1, int(max_pending))
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="EmailDelivery",
        )
        self._slots = threading.BoundedSemaphore(self.max_pending)
        self._pending: Set[Future] = set()
        self._pending_lock = threading.Lock()

    def submit(self, task: Callable, *args, **kwargs) -> Optional[Future]:
        """Queue ``task``; returns None when the pool is saturated."""
        if not self._slots.acquire(blocking=False):
            self.logger.warning(f"Delivery queue full ({self.max_pending} pending); dropping task")
            return None

        try:
            future = self._executor.submit(task, *args, **kwargs)
        except RuntimeError as exc:
            self._slots.release()
            self.logger.error(f"Delivery pool unavailable: {exc}")
            return None

        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._task_done)
        return future

    def _task_done(self, future: Future):
        with self._pending_lock:
            self._pending.discard(future)
        self._slots.release()

        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            self.logger.error(f"Delivery task raised: {exc}")

    @property
    def outstanding(self) -> int:
        with self._pending_lock:
            return len(self._pending)

    def wait_for_outstanding(self, timeout: Optional[float] = None) -> bool:
        """Block until every submitted task finished. True if none remain."""
        with self._pending_lock:
            futures = list(self._pending)
        if not futures:
            return True
        _, not_done = wait(futures, timeout=timeout)
        return not not_done

    def shutdown(self, wait_for_tasks: bool = False):
        self._executor.shutdown(wait=wait_for_tasks)
