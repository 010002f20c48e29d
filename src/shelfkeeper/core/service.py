# ABOUTME: Catalog service orchestrating the store, title index, reservations, and ledger.
# ABOUTME: Implements ingest, search, and the reserve/lend/return state machine.

import logging

from shelfkeeper.catalog.store import RecordStore
from shelfkeeper.catalog.title_index import TitleIndex
from shelfkeeper.catalog.types import Book, RawRecord
from shelfkeeper.core.parsing import MalformedRowError, parse_record
from shelfkeeper.lending.ledger import LendingLedger
from shelfkeeper.lending.outcomes import (
    BookNotFound,
    Lent,
    LendOutcome,
    NoBooksToLend,
    NoBooksToReturn,
    ReturnError,
    Returned,
    ReturnOutcome,
    Unavailable,
)
from shelfkeeper.lending.reservations import ReservationQueue

logger = logging.getLogger(__name__)


class CatalogService:
    """Single-threaded, in-memory catalog with a reservation and lending workflow.

    The RecordStore is the source of truth. The TitleIndex holds copies made
    when each book was added and is never re-indexed, so its entries can lag
    behind the live records once lending starts. Lend and return always
    resolve titles through the RecordStore.

    lend_book and return_book each touch several structures per call. The
    service does no locking; share one instance across threads only behind
    a single lock around every mutating call.
    """

    def __init__(self) -> None:
        self._store = RecordStore()
        self._index = TitleIndex()
        self._reservations = ReservationQueue()
        self._ledger = LendingLedger()

    @property
    def index(self) -> TitleIndex:
        return self._index

    def ingest(self, record: RawRecord) -> Book | None:
        """Parse a raw record and add it to the catalog.

        Malformed records are logged and skipped so a batch can continue.

        Returns:
            The added Book, or None if the record was rejected.
        """
        try:
            book = parse_record(record)
        except MalformedRowError as exc:
            logger.error("%s", exc)
            return None

        self.add_book(book)
        return book

    def add_book(self, book: Book) -> None:
        """Write a book through to the store (upsert) and the title index (always a new node)."""
        if book.identifier in self._store:
            logger.warning(
                "ISBN %s already cataloged; replacing record and indexing again",
                book.identifier,
            )
        self._store.put(book)
        self._index.insert(book)
        logger.info(
            "Added book: %s (ISBN: %s, Quantity: %d)",
            book.title, book.identifier, book.total_copies,
        )

    def get_book(self, identifier: str) -> Book | None:
        return self._store.get(identifier)

    def search_by_title(self, title: str) -> Book | None:
        """Exact, case-sensitive title lookup through the title index."""
        logger.debug("Searching for title: '%s'", title)
        return self._index.search(title)

    def reserve_book(self, title: str) -> None:
        """Queue a reservation. Titles are not checked against the catalog until lend time."""
        self._reservations.reserve(title)
        logger.debug("Reserved: '%s'", title)

    def reservations(self) -> list[str]:
        """Pending reservations, front of the queue first."""
        return self._reservations.peek_all()

    def lend_book(self) -> LendOutcome:
        """Serve the reservation at the front of the queue.

        An unknown title is dropped from the queue. A known title with no
        copies on the shelf goes back to the front of the queue.
        """
        title = self._reservations.pop_front()
        if title is None:
            return NoBooksToLend()

        book = self._store.find_by_title(title)
        if book is None:
            logger.debug("Dropping reservation for unknown title '%s'", title)
            return BookNotFound(title)

        if book.total_copies == 0:
            self._reservations.push_front(title)
            logger.debug("No copies of '%s' available; reservation kept at front", title)
            return Unavailable(title)

        # book is the live store entry. The ledger copy is taken before either
        # counter moves, so it keeps the pre-lend counts.
        self._ledger.push(book.snapshot())
        book.total_copies -= 1
        book.borrowed_count += 1

        logger.debug("Lent '%s'; %d copies remaining", book.title, book.total_copies)
        return Lent(book.title, book.total_copies)

    def return_book(self) -> ReturnOutcome:
        """Return the most recently lent book to the live catalog entry with its title."""
        snapshot = self._ledger.pop()
        if snapshot is None:
            return NoBooksToReturn()

        book = self._store.find_by_title(snapshot.title)
        if book is None:
            logger.error("Book not found for returning: %s", snapshot.title)
            return ReturnError(snapshot.title)

        book.borrowed_count -= 1
        book.total_copies += 1

        logger.debug("Returned '%s'; %d copies available", book.title, book.total_copies)
        return Returned(book.title, book.total_copies)

    def list_books(self) -> list[Book]:
        """Full inventory from the record store."""
        return self._store.all()
