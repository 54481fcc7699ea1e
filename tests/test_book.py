import pytest

from managekit.library.book import MAX_PUBLICATION_YEAR, MIN_PUBLICATION_YEAR, Book
from managekit.library.errors import (
    BookError,
    EmptyAuthorError,
    EmptyTitleError,
    PublicationYearError,
)


@pytest.fixture
def book():
    return Book("Dune", "Frank Herbert", 1965)


def test_new_book_has_one_available_copy(book):
    assert book.title == "Dune"
    assert book.author == "Frank Herbert"
    assert book.publication_year == 1965
    assert book.total_copies == 1
    assert book.available_copies == 1
    assert book.is_available is True


def test_empty_title_rejected():
    with pytest.raises(EmptyTitleError, match="title cannot be empty"):
        Book("", "Someone", 1990)


def test_empty_author_rejected():
    with pytest.raises(EmptyAuthorError, match="Author cannot be empty"):
        Book("Title", "", 1990)


@pytest.mark.parametrize("year", [MIN_PUBLICATION_YEAR - 1, MAX_PUBLICATION_YEAR + 1])
def test_year_out_of_range_rejected(year):
    with pytest.raises(PublicationYearError):
        Book("Title", "Author", year)


@pytest.mark.parametrize("year", [MIN_PUBLICATION_YEAR, MAX_PUBLICATION_YEAR])
def test_year_bounds_accepted(year):
    assert Book("Title", "Author", year).publication_year == year


def test_errors_share_base_class():
    with pytest.raises(BookError):
        Book("", "Author", 1990)


def test_add_then_remove_copies_restores_counts(book):
    total, available = book.total_copies, book.available_copies
    book.add_copies(4)
    assert book.total_copies == total + 4
    assert book.available_copies == available + 4
    book.remove_copies(4)
    assert (book.total_copies, book.available_copies) == (total, available)


def test_add_zero_copies_rejected(book):
    with pytest.raises(BookError) as excinfo:
        book.add_copies(0)
    assert "positive non-zero" in str(excinfo.value)
    assert (book.total_copies, book.available_copies) == (1, 1)


def test_remove_zero_copies_rejected(book):
    with pytest.raises(BookError) as excinfo:
        book.remove_copies(0)
    assert "positive non-zero" in str(excinfo.value)
    assert (book.total_copies, book.available_copies) == (1, 1)


def test_cannot_remove_more_than_available(book):
    book.borrow()
    with pytest.raises(BookError, match="Cannot remove more copies than available"):
        book.remove_copies(1)
    assert book.total_copies == 1


def test_borrow_and_give_back(book):
    book.borrow()
    assert book.available_copies == 0
    assert book.is_available is False
    assert book.borrowed_copies == 1
    book.give_back()
    assert book.available_copies == book.total_copies


def test_borrow_without_copies_fails(book):
    book.borrow()
    with pytest.raises(BookError, match="No Copies available to borrow"):
        book.borrow()


def test_give_back_when_all_returned_fails(book):
    with pytest.raises(BookError, match="All Copies are already returned"):
        book.give_back()


def test_describe_mentions_fields(book):
    text = book.describe()
    assert "Dune" in text
    assert "Frank Herbert" in text
    assert "1965" in text