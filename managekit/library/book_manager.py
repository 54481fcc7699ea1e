"""Catalogue of the library's books keyed by title."""

from __future__ import annotations

from managekit.library.book import Book
from managekit.library.errors import BookError, EmptyAuthorError


class BookManager:
    """Holds books by title and manages their copies and loans."""

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}

    def __contains__(self, title: object) -> bool:
        return title in self._books

    def __len__(self) -> int:
        return len(self._books)

    def create_book(self, title: str, author: str, year: int) -> Book:
        """Add a new title with one copy and return it."""
        if title in self._books:
            raise BookError("Book Already Exist")
        book = Book(title, author, year)
        self._books[title] = book
        return book

    def delete_book(self, title: str) -> None:
        """Remove a title; refused while any copy is on loan."""
        book = self._books.get(title)
        if book is None:
            raise BookError("Book doesnt Exist, cant remove something non-existant")
        if book.borrowed_copies:
            raise BookError(
                f"Cannot delete book, {book.borrowed_copies} copy/copies still borrowed"
            )
        del self._books[title]

    def get(self, title: str) -> Book:
        try:
            return self._books[title]
        except KeyError:
            raise BookError("Book doesn't Exist") from None

    def add_copies(self, title: str, copies: int) -> None:
        self.get(title).add_copies(copies)

    def remove_copies(self, title: str, copies: int) -> None:
        self.get(title).remove_copies(copies)

    def borrow(self, title: str) -> None:
        self.get(title).borrow()

    def give_back(self, title: str) -> None:
        self.get(title).give_back()

    def describe(self, title: str) -> str:
        return self.get(title).describe()

    def describe_all(self) -> str:
        return "\n".join(book.describe() for book in self._books.values())

    def titles(self) -> list[str]:
        return list(self._books)

    def books(self) -> list[Book]:
        return list(self._books.values())

    def search_by_author(self, author: str) -> list[Book]:
        if not author:
            raise EmptyAuthorError()
        return [book for book in self._books.values() if book.author == author]

    def search_by_year(self, year: int) -> list[Book]:
        return [book for book in self._books.values() if book.publication_year == year]

    def borrowed_books(self) -> list[Book]:
        """Return the books that have at least one copy on loan."""
        return [book for book in self._books.values() if book.borrowed_copies > 0]

    def total_copies(self) -> int:
        """Return the number of copies of all titles together."""
        return sum(book.total_copies for book in self._books.values())

    def unique_count(self) -> int:
        """Return the number of distinct titles."""
        return len(self._books)