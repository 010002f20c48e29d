# ABOUTME: Record store holding the authoritative Book entries keyed by identifier.
# ABOUTME: Provides exact-key lookup and a case-insensitive title finder.

from shelfkeeper.catalog.types import Book


def _normalize_title(title: str) -> str:
    return title.strip().lower()


class RecordStore:
    """Owns the live Book entries, keyed by identifier (ISBN)."""

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._books

    def put(self, book: Book) -> None:
        """Insert or silently replace the entry under book.identifier."""
        self._books[book.identifier] = book

    def get(self, identifier: str) -> Book | None:
        """Retrieve the live entry for an identifier."""
        return self._books.get(identifier)

    def find_by_title(self, title: str) -> Book | None:
        """Return the first entry whose title matches, ignoring case and surrounding whitespace.

        Callers must not rely on which entry is returned when several share a title.
        The returned Book is the live entry, not a copy.
        """
        wanted = _normalize_title(title)
        for book in self._books.values():
            if _normalize_title(book.title) == wanted:
                return book
        return None

    def all(self) -> list[Book]:
        """Return the entries present at call time."""
        return list(self._books.values())
