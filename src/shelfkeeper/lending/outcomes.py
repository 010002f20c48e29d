# ABOUTME: Tagged result values for the lend and return operations.
# ABOUTME: Each outcome carries its data plus the console message shown to the user.

from dataclasses import dataclass


@dataclass(frozen=True)
class NoBooksToLend:
    """The reservation queue was empty."""

    ok = False

    @property
    def message(self) -> str:
        return "No books to lend."


@dataclass(frozen=True)
class BookNotFound:
    """The reserved title matched no catalog entry; the reservation was dropped."""

    title: str
    ok = False

    @property
    def message(self) -> str:
        return f"Book not found: '{self.title}'"


@dataclass(frozen=True)
class Unavailable:
    """The title exists but has no copies on the shelf; the reservation was re-queued."""

    title: str
    ok = False

    @property
    def message(self) -> str:
        return (
            f"No copies of '{self.title}' available. "
            "It will be lent when the next copy is returned."
        )


@dataclass(frozen=True)
class Lent:
    """A copy was lent and pushed onto the ledger."""

    title: str
    remaining_copies: int
    ok = True

    @property
    def message(self) -> str:
        return f"Lent: {self.title} (Remaining copies: {self.remaining_copies})"


@dataclass(frozen=True)
class NoBooksToReturn:
    """The lending ledger was empty."""

    ok = False

    @property
    def message(self) -> str:
        return "No books to return."


@dataclass(frozen=True)
class ReturnError:
    """The returned snapshot's title no longer resolves to a catalog entry."""

    title: str
    ok = False

    @property
    def message(self) -> str:
        return f"Error: Book not found for returning: {self.title}"


@dataclass(frozen=True)
class Returned:
    """A copy went back on the shelf."""

    title: str
    available_copies: int
    ok = True

    @property
    def message(self) -> str:
        return f"Returned: {self.title} (Available copies: {self.available_copies})"


LendOutcome = NoBooksToLend | BookNotFound | Unavailable | Lent
ReturnOutcome = NoBooksToReturn | ReturnError | Returned
