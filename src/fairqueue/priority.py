"""Priority queue with FIFO tie-breaking.

Items are stored in insertion order. Removal scans for the highest
priority and takes the first one found, so equal priorities leave
in the order they arrived.
"""

import logging
from dataclasses import dataclass

from fairqueue.errors import EmptyQueueError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriorityItem:
    """A value waiting in a priority queue."""

    value: str
    priority: int

    def __str__(self) -> str:
        return f"{self.value} (Pri:{self.priority})"


class PriorityQueue:
    """Queue where the highest priority value is removed first."""

    def __init__(self) -> None:
        self._queue: list[PriorityItem] = []

    def __len__(self) -> int:
        return len(self._queue)

    def __str__(self) -> str:
        return f"[{', '.join(str(item) for item in self._queue)}]"

    def is_empty(self) -> bool:
        return not self._queue

    def items(self) -> tuple[PriorityItem, ...]:
        """Snapshot of the stored items in insertion order."""
        return tuple(self._queue)

    def enqueue(self, value: str, priority: int) -> None:
        """Add a value to the back of the queue regardless of priority."""
        self._queue.append(PriorityItem(value, priority))
        logger.debug(f"Enqueued {value!r} with priority {priority} (size={len(self._queue)})")

    def dequeue(self) -> str:
        """Remove and return the highest priority value.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        index = self._highest_index()
        item = self._queue.pop(index)
        logger.debug(f"Dequeued {item.value!r} with priority {item.priority} from index {index}")
        return item.value

    def peek(self) -> str:
        """Return the value ``dequeue`` would remove, without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        return self._queue[self._highest_index()].value

    def _highest_index(self) -> int:
        if not self._queue:
            raise EmptyQueueError("The queue is empty.")

        best = 0
        for i in range(1, len(self._queue)):
            # Strictly greater keeps the earliest of equal priorities
            if self._queue[i].priority > self._queue[best].priority:
                best = i
        return best


__all__ = ["PriorityItem", "PriorityQueue"]
