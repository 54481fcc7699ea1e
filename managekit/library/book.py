"""A book title held by the library in one or more copies."""

from __future__ import annotations

from managekit.library.errors import (
    BookError,
    EmptyAuthorError,
    EmptyTitleError,
    PublicationYearError,
)

MIN_PUBLICATION_YEAR = 850
MAX_PUBLICATION_YEAR = 2025


class Book:
    """A title with an author, a publication year and a count of copies."""

    def __init__(self, title: str, author: str, year: int) -> None:
        if not title:
            raise EmptyTitleError()
        if not author:
            raise EmptyAuthorError()
        if not MIN_PUBLICATION_YEAR <= year <= MAX_PUBLICATION_YEAR:
            raise PublicationYearError()
        self._title = title
        self._author = author
        self._publication_year = year
        self._total_copies = 1
        self._available_copies = 1

    def __repr__(self) -> str:
        return (
            f"Book(title={self._title!r}, author={self._author!r}, "
            f"year={self._publication_year!r}, total={self._total_copies}, "
            f"available={self._available_copies})"
        )

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def publication_year(self) -> int:
        return self._publication_year

    @property
    def total_copies(self) -> int:
        return self._total_copies

    @property
    def available_copies(self) -> int:
        return self._available_copies

    @property
    def is_available(self) -> bool:
        return self._available_copies != 0

    @property
    def borrowed_copies(self) -> int:
        return self._total_copies - self._available_copies

    def add_copies(self, number: int) -> None:
        """Add ``number`` new copies, all of them available."""
        if number <= 0:
            raise BookError("number of copies must be a positive non-zero number")
        self._total_copies += number
        self._available_copies += number

    def remove_copies(self, number: int) -> None:
        """Remove ``number`` copies; only copies on the shelf can be removed."""
        if number <= 0:
            raise BookError("number of copies must be a positive non-zero number")
        if number > self._available_copies:
            raise BookError("Cannot remove more copies than available")
        self._total_copies -= number
        self._available_copies -= number

    def borrow(self) -> None:
        if self._available_copies == 0:
            raise BookError("No Copies available to borrow")
        self._available_copies -= 1

    def give_back(self) -> None:
        if self._available_copies >= self._total_copies:
            raise BookError("All Copies are already returned")
        self._available_copies += 1

    def describe(self) -> str:
        """Return a one-line summary of the book."""
        return (
            f"title : {self._title}, Author : {self._author}, "
            f"publicationYear : {self._publication_year}"
        )