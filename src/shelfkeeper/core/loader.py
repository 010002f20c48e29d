# ABOUTME: Loads book records from a comma-delimited file into the catalog service.
# ABOUTME: Skips blank lines, rejects unsplittable rows, and tolerates unreadable files.

import csv
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from shelfkeeper.catalog.types import RawRecord
from shelfkeeper.core.parsing import MalformedRowError
from shelfkeeper.core.service import CatalogService

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Summary of a catalog load."""

    added: int = 0
    rejected: int = 0
    error_details: list[tuple[int, str]] = field(default_factory=list)
    file_error: str | None = None


def read_records(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every non-blank line.

    Line numbers are 1-based and count blank lines too.
    """
    for line_number, line in enumerate(lines, start=1):
        if line.strip():
            yield line_number, line


def split_record(line: str) -> RawRecord:
    """Split one delimited line into its textual fields.

    Raises:
        MalformedRowError: If the line cannot be split, e.g. a field exceeds
            the csv field size limit.
    """
    try:
        row = next(csv.reader([line]))
    except csv.Error as exc:
        raise MalformedRowError(f"Unreadable row: {exc}", (line,)) from exc
    return tuple(row)


def load_catalog(path: Path, service: CatalogService) -> LoadResult:
    """Feed every record in a delimited file through service.ingest.

    A file that cannot be opened is logged and reported in
    LoadResult.file_error; the catalog is left unchanged. Bytes that are
    not valid UTF-8 are replaced rather than failing the whole file.

    Args:
        path: File with one identifier,title,author,price,quantity row per line.
        service: The catalog receiving the records.

    Returns:
        LoadResult with counts of added and rejected rows.
    """
    result = LoadResult()

    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        logger.error("Error opening file: %s (%s)", path, exc)
        result.file_error = str(exc)
        return result

    for line_number, line in read_records(lines):
        try:
            record = split_record(line)
        except MalformedRowError as exc:
            logger.error("Line %d: %s", line_number, exc)
            book = None
        else:
            book = service.ingest(record)

        if book is None:
            result.rejected += 1
            result.error_details.append((line_number, line))
        else:
            result.added += 1

    logger.info("Books loaded from %s", path)
    return result
