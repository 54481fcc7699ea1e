"""A library member and the titles they have on loan."""

from __future__ import annotations

from managekit.library.dates import Date
from managekit.library.errors import BookError


class User:
    """A named member with a birth date and a list of borrowed titles."""

    def __init__(self, name: str = "Unvalid", birth_date: Date | None = None) -> None:
        self._name = name
        self._birth_date = birth_date if birth_date is not None else Date()
        self._borrowed: list[str] = []

    def __repr__(self) -> str:
        return f"User(name={self._name!r}, birth_date={self._birth_date!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def birth_date(self) -> Date:
        return self._birth_date

    @property
    def borrowed_books(self) -> list[str]:
        """Titles on loan, in the order they were borrowed."""
        return list(self._borrowed)

    def borrow(self, title: str) -> None:
        if not title:
            raise BookError("User.borrow : bookTitle cannot be empty")
        if title in self._borrowed:
            raise BookError(
                "User.borrow : book already in borrowed List, cant borrow again"
            )
        self._borrowed.append(title)

    def give_back(self, title: str) -> None:
        if not title:
            raise BookError("User.give_back : bookTitle cannot be empty")
        try:
            self._borrowed.remove(title)
        except ValueError:
            raise BookError(
                "User.give_back : bookTitle cannot be found in borrowedBookList"
            ) from None

    def describe(self) -> str:
        return f"User name : {self._name} birth Date : {self._birth_date}"