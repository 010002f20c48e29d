# ABOUTME: Converts raw textual records into Book entries.
# ABOUTME: Rejects rows with missing or malformed price and quantity fields.

import math
import re

from shelfkeeper.catalog.types import Book, RawRecord

_FIELD_COUNT = 5

# Plain ASCII decimals: no underscores, exponents, or non-ASCII digits.
_PRICE_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_QUANTITY_RE = re.compile(r"-?[0-9]+")


class MalformedRowError(ValueError):
    """Raised when a raw record cannot be turned into a Book."""

    def __init__(self, message: str, record: RawRecord) -> None:
        super().__init__(message)
        self.record = record


def parse_record(record: RawRecord) -> Book:
    """Build a Book from an (identifier, title, author, price, quantity) record.

    Fields are whitespace-trimmed, missing trailing fields are treated as
    empty, and anything past the fifth field is ignored.

    Raises:
        MalformedRowError: If price or quantity is missing, not numeric,
            or negative.
    """
    fields = [value.strip() for value in record[:_FIELD_COUNT]]
    fields += [""] * (_FIELD_COUNT - len(fields))
    identifier, title, author, price_str, quantity_str = fields

    if not price_str or not quantity_str:
        raise MalformedRowError(
            f"Missing price or quantity in row: {','.join(record)}", record,
        )

    if not _PRICE_RE.fullmatch(price_str) or not _QUANTITY_RE.fullmatch(quantity_str):
        raise MalformedRowError(
            f"Error converting price or quantity: '{price_str}', '{quantity_str}' "
            f"in row: {','.join(record)}",
            record,
        )

    price = float(price_str)
    quantity = int(quantity_str)

    if not math.isfinite(price) or price < 0 or quantity < 0:
        raise MalformedRowError(
            f"Price and quantity must be non-negative in row: {','.join(record)}",
            record,
        )

    return Book(
        identifier=identifier,
        title=title,
        author=author,
        price=price,
        total_copies=quantity,
    )
