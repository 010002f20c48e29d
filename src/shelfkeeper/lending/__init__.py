# ABOUTME: Public API for the Shelfkeeper lending layer.
# ABOUTME: Exports the reservation queue, the lending ledger, and the outcome types.

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

__all__ = [
    "BookNotFound",
    "LendOutcome",
    "LendingLedger",
    "Lent",
    "NoBooksToLend",
    "NoBooksToReturn",
    "ReservationQueue",
    "ReturnError",
    "ReturnOutcome",
    "Returned",
    "Unavailable",
]
