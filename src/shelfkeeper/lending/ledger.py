# ABOUTME: LIFO ledger of Book snapshots taken at lend time.
# ABOUTME: The most recently lent book is the first one returned.

from shelfkeeper.catalog.types import Book


class LendingLedger:
    """Stack of borrowed-book snapshots."""

    def __init__(self) -> None:
        self._stack: list[Book] = []

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, snapshot: Book) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Book | None:
        """Remove and return the most recent snapshot, or None if nothing is lent."""
        if not self._stack:
            return None
        return self._stack.pop()
