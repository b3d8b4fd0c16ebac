"""
Cooperative single-threaded task queue (the client thread).

``invoke_later`` defers a task to the next idle tick. Tasks queued under a
slot replace whatever is still pending in that slot, so a burst of
keystrokes results in one filter recompute per tick.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

Task = Callable[[], object]


@dataclass
class _PendingTask:
    task: Task
    slot: Optional[str] = None


class DeferredTasks:
    """Pending work for the next tick, run in enqueue order."""

    def __init__(self) -> None:
        self._pending: list[_PendingTask] = []

    def invoke(self, task: Task) -> None:
        """Run ``task`` right away on the calling (client) thread."""
        task()

    def invoke_later(self, task: Task, slot: Optional[str] = None) -> None:
        """Queue ``task`` for the next tick.

        Args:
            task: Callable taking no arguments
            slot: Optional name; a pending task with the same slot is dropped
        """
        if slot is not None:
            self._pending = [p for p in self._pending if p.slot != slot]
        self._pending.append(_PendingTask(task=task, slot=slot))

    def run_pending(self) -> int:
        """Run the tasks queued before this call.

        Tasks queued while running wait for the next tick. A failing task is
        logged and does not stop the rest.

        Returns:
            Number of tasks run
        """
        batch, self._pending = self._pending, []
        for pending in batch:
            try:
                pending.task()
            except Exception:
                logger.exception(f"Deferred task failed (slot={pending.slot})")
        return len(batch)

    def __len__(self) -> int:
        return len(self._pending)
