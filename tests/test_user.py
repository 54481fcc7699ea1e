import pytest

from managekit.library.dates import Date
from managekit.library.errors import BookError
from managekit.library.user import User


@pytest.fixture
def user():
    return User("Alice", Date(1, 2, 1990))


def test_default_user():
    user = User()
    assert user.name == "Unvalid"
    assert user.birth_date == Date()
    assert user.borrowed_books == []


def test_borrow_records_titles_in_order(user):
    user.borrow("Dune")
    user.borrow("Emma")
    assert user.borrowed_books == ["Dune", "Emma"]


def test_borrow_same_title_twice_rejected(user):
    user.borrow("Dune")
    with pytest.raises(BookError, match="already in borrowed List"):
        user.borrow("Dune")
    assert user.borrowed_books == ["Dune"]


def test_borrow_empty_title_rejected(user):
    with pytest.raises(BookError, match="cannot be empty"):
        user.borrow("")


def test_give_back_removes_title(user):
    user.borrow("Dune")
    user.borrow("Emma")
    user.give_back("Dune")
    assert user.borrowed_books == ["Emma"]


def test_give_back_unknown_title_rejected(user):
    with pytest.raises(BookError, match="cannot be found"):
        user.give_back("Dune")


def test_give_back_empty_title_rejected(user):
    with pytest.raises(BookError, match="cannot be empty"):
        user.give_back("")


def test_borrowed_books_is_a_copy(user):
    user.borrowed_books.append("Injected")
    assert user.borrowed_books == []


def test_describe_mentions_name_and_date(user):
    text = user.describe()
    assert text.startswith("User name : Alice")
    assert str(Date(1, 2, 1990)) in text