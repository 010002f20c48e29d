# ABOUTME: Public API for the Shelfkeeper catalog layer.
# ABOUTME: Exports the Book model, the identifier-keyed store, and the title index.

from shelfkeeper.catalog.store import RecordStore
from shelfkeeper.catalog.title_index import TitleIndex
from shelfkeeper.catalog.types import Book, RawRecord

__all__ = [
    "Book",
    "RawRecord",
    "RecordStore",
    "TitleIndex",
]
