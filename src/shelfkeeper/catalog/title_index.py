# ABOUTME: Unbalanced binary search tree indexing catalog entries by raw title.
# ABOUTME: Supports incremental insert and exact-match search.

from dataclasses import dataclass

from shelfkeeper.catalog.types import Book


@dataclass
class _Node:
    book: Book
    left: "_Node | None" = None
    right: "_Node | None" = None


class TitleIndex:
    """Binary search tree keyed by title, compared case-sensitively.

    Each node holds a snapshot of the Book taken at insert time, so the index
    does not see later changes made to the live entry in the RecordStore.
    There is no deletion and no rebalancing: the tree shape depends only on
    insertion order, and sorted input degrades it to a linked list.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, book: Book) -> None:
        """Add a node for book.

        Titles strictly less than a node's title go left; everything else,
        including an exact tie, goes right. Duplicate titles therefore always
        land to the right of the earlier occurrence.
        """
        node = _Node(book.snapshot())
        self._size += 1

        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if book.title < current.book.title:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, title: str) -> Book | None:
        """Find the first node on the search path whose title equals title exactly."""
        current = self._root
        while current is not None:
            if current.book.title == title:
                return current.book
            current = current.left if title < current.book.title else current.right
        return None
