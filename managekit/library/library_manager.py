"""Library front end tying books to the members who borrow them."""

from __future__ import annotations

from managekit.library.book import Book
from managekit.library.book_manager import BookManager
from managekit.library.dates import Date
from managekit.library.errors import BookError
from managekit.library.user import User
from managekit.library.user_manager import UserManager


class LibraryManager:
    """Registers members and books and lends books to members."""

    def __init__(self) -> None:
        self._books = BookManager()
        self._users = UserManager()

    @property
    def books(self) -> BookManager:
        return self._books

    @property
    def users(self) -> UserManager:
        return self._users

    def create_user(self, name: str, birth_date: Date) -> User:
        return self._users.create_user(name, birth_date)

    def remove_user(self, name: str) -> None:
        self._users.remove_user(name)

    def add_book(self, title: str, author: str, year: int) -> Book:
        return self._books.create_book(title, author, year)

    def remove_book(self, title: str) -> None:
        self._books.delete_book(title)

    def _check(self, user_name: str, title: str, action: str) -> None:
        if title not in self._books:
            raise BookError(f"LibraryManager.{action} : book does not exist")
        if not self._users.exists(user_name):
            raise BookError(f"LibraryManager.{action} : user does not exist")

    def borrow_book(self, user_name: str, title: str) -> None:
        """Lend one copy of ``title`` to ``user_name``."""
        self._check(user_name, title, "borrow_book")
        self._books.borrow(title)
        self._users.borrow(user_name, title)

    def return_book(self, user_name: str, title: str) -> None:
        """Take back a copy of ``title`` from ``user_name``."""
        self._check(user_name, title, "return_book")
        self._books.give_back(title)
        self._users.give_back(user_name, title)