# ABOUTME: Shared pytest fixtures for Shelfkeeper tests.
# ABOUTME: Provides sample catalog files (valid and malformed) and prebuilt books.

from pathlib import Path

import pytest

from shelfkeeper.catalog.types import Book

SAMPLE_ROWS = [
    "9780451524935, 1984, George Orwell, 9.99, 2",
    "9780441172719, Dune, Frank Herbert, 10.50, 1",
    "9780061120084, To Kill a Mockingbird, Harper Lee, 7.19, 3",
    "9780743273565, The Great Gatsby, F. Scott Fitzgerald, 10.00, 0",
]


@pytest.fixture
def catalog_csv(tmp_path: Path) -> Path:
    """A well-formed catalog file with four books and a blank line."""
    path = tmp_path / "books.csv"
    path.write_text("\n".join([*SAMPLE_ROWS[:2], "", *SAMPLE_ROWS[2:]]) + "\n")
    return path


@pytest.fixture
def malformed_csv(tmp_path: Path) -> Path:
    """A catalog file with three valid rows and one row missing its quantity."""
    path = tmp_path / "mixed.csv"
    path.write_text(
        "\n".join([
            SAMPLE_ROWS[0],
            "9780000000001, Broken Book, Nobody, 4.50,",
            SAMPLE_ROWS[1],
            SAMPLE_ROWS[2],
        ])
        + "\n"
    )
    return path


@pytest.fixture
def dune() -> Book:
    return Book(
        identifier="X1",
        title="Dune",
        author="Frank Herbert",
        price=10.5,
        total_copies=1,
    )
