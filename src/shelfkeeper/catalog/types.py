# ABOUTME: Core data structures for the Shelfkeeper catalog.
# ABOUTME: Book is the catalog entry shared by the store, the title index, and the ledger.

from dataclasses import dataclass, replace

# Textual fields in file order: identifier, title, author, price, quantity.
RawRecord = tuple[str, ...]


@dataclass
class Book:
    """One title's catalog entry.

    total_copies counts the copies currently on the shelf and borrowed_count
    the copies currently lent out. The two counters are updated independently
    by the lending workflow and are not required to sum to a constant.
    """

    identifier: str
    title: str
    author: str
    price: float
    total_copies: int
    borrowed_count: int = 0

    def snapshot(self) -> "Book":
        """Return a value copy decoupled from this entry."""
        return replace(self)
