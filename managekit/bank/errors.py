"""Exceptions raised by the banking components."""


class BankError(Exception):
    """Base class for every banking error."""


class AccountNotFoundError(BankError):
    """Raised when an operation refers to an account that does not exist."""

    def __init__(self, message: str = "Account not Found") -> None:
        super().__init__(message)


class AccountAlreadyExistsError(BankError):
    """Raised when an account with the same identifier is already registered."""

    def __init__(self, message: str = "Account Already Exists : cant create Again") -> None:
        super().__init__(message)


class InsufficientFundsError(BankError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, message: str = "InsufficientFunds : cannot withdraw") -> None:
        super().__init__(message)