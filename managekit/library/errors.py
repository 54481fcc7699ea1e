"""Exceptions raised by the library components."""


class BookError(Exception):
    """Base class for every library error."""


class EmptyTitleError(BookError):
    """Raised when a book is given an empty title."""

    def __init__(self, message: str = "title cannot be empty") -> None:
        super().__init__(message)


class EmptyAuthorError(BookError):
    """Raised when a book or a search is given an empty author."""

    def __init__(self, message: str = "Author cannot be empty") -> None:
        super().__init__(message)


class PublicationYearError(BookError):
    """Raised when a publication year lies outside the accepted range."""

    def __init__(
        self, message: str = "Publciation Year must be between MIN and MAX"
    ) -> None:
        super().__init__(message)