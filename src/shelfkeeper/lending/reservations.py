# ABOUTME: FIFO queue of pending reservation requests, one title string per entry.
# ABOUTME: Supports re-queueing at the front when a lend attempt finds no copies.

from collections import deque


class ReservationQueue:
    """Strict FIFO of reserved titles. Identical titles are distinct entries."""

    def __init__(self) -> None:
        self._titles: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._titles)

    def reserve(self, title: str) -> None:
        """Append a reservation to the back of the queue."""
        self._titles.append(title)

    def peek_all(self) -> list[str]:
        """Return the pending titles front to back, as a copy."""
        return list(self._titles)

    def pop_front(self) -> str | None:
        """Remove and return the earliest reservation, or None if the queue is empty."""
        if not self._titles:
            return None
        return self._titles.popleft()

    def push_front(self, title: str) -> None:
        """Put a reservation back at the front, ahead of everything queued after it."""
        self._titles.appendleft(title)
