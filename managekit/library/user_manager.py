"""Registry of library members keyed by name."""

from __future__ import annotations

from managekit.library.dates import Date
from managekit.library.errors import BookError
from managekit.library.user import User


class UserManager:
    """Holds members by name and records their loans."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    @staticmethod
    def _check_name(name: str, operation: str) -> None:
        if not name:
            raise BookError(f"UserManager.{operation} : user name cannot be empty")

    def _find(self, name: str, operation: str) -> User:
        self._check_name(name, operation)
        try:
            return self._users[name]
        except KeyError:
            raise BookError(f"UserManager.{operation} : User does not exists") from None

    def create_user(self, name: str, birth_date: Date) -> User:
        self._check_name(name, "create_user")
        if not birth_date.is_valid():
            raise BookError("UserManager.create_user : birth Date not valid")
        if name in self._users:
            raise BookError("UserManager.create_user : User already exists")
        user = User(name, birth_date)
        self._users[name] = user
        return user

    def remove_user(self, name: str) -> None:
        self._find(name, "remove_user")
        del self._users[name]

    def get(self, name: str) -> User:
        return self._find(name, "get")

    def borrowed_books(self, name: str) -> list[str]:
        return self._find(name, "borrowed_books").borrowed_books

    def exists(self, name: str) -> bool:
        self._check_name(name, "exists")
        return name in self._users

    def borrow(self, name: str, title: str) -> None:
        self._check_name(name, "borrow")
        if not title:
            raise BookError("UserManager.borrow : bookTitle cannot be empty")
        self._find(name, "borrow").borrow(title)

    def give_back(self, name: str, title: str) -> None:
        self._check_name(name, "give_back")
        if not title:
            raise BookError("UserManager.give_back : bookTitle cannot be empty")
        self._find(name, "give_back").give_back(title)

    def describe(self, name: str) -> str:
        return self._find(name, "describe").describe()

    def describe_all(self) -> str:
        return "\n".join(user.describe() for user in self._users.values())

    def names(self) -> list[str]:
        return list(self._users)

    def users(self) -> list[User]:
        return list(self._users.values())