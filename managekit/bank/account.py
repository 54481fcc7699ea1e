"""A single bank account with a holder name and a balance."""

from __future__ import annotations

from managekit.bank.errors import BankError, InsufficientFundsError

MIN_NAME_LENGTH = 3


class BankAccount:
    """An account identified by ``account_id`` and holding a non-negative balance."""

    def __init__(self, name: str, account_id: str, balance: float) -> None:
        if not name or not account_id:
            raise BankError("name and ID must not be empty")
        if len(name) < MIN_NAME_LENGTH:
            raise BankError("Name must be at least three characters long")
        if balance < 0:
            raise BankError("Balance cannot be negative.")
        self._name = name
        self._account_id = account_id
        self._balance = float(balance)

    def __repr__(self) -> str:
        return (
            f"BankAccount(name={self._name!r}, account_id={self._account_id!r}, "
            f"balance={self._balance!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            raise BankError("Name cannot be empty")
        if len(value) < MIN_NAME_LENGTH:
            raise BankError("Name must be at least 3 characters long")
        self._name = value

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> None:
        """Add a positive amount to the balance."""
        if amount <= 0:
            raise BankError("Deposit amount must be positive")
        self._balance += amount

    def withdraw(self, amount: float) -> None:
        """Take a positive amount from the balance, if the funds allow it."""
        if amount <= 0:
            raise BankError("Withdrawal amount must be positive")
        if self._balance < amount:
            raise InsufficientFundsError()
        self._balance -= amount

    def describe(self) -> str:
        """Return a human-readable summary of the account."""
        return (
            f"Account Name: {self._name}\n"
            f"Account ID: {self._account_id}\n"
            f"Balance: ${self._balance:g}"
        )