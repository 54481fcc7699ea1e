"""Registry of bank accounts keyed by their identifier."""

from __future__ import annotations

from managekit.bank.account import BankAccount
from managekit.bank.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    BankError,
)


class AccountManager:
    """Holds accounts and applies deposits and withdrawals to them."""

    def __init__(self) -> None:
        self._accounts: dict[str, BankAccount] = {}

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def add(self, account: BankAccount) -> None:
        """Register an account; its identifier must be new."""
        if account.account_id in self._accounts:
            raise AccountAlreadyExistsError()
        self._accounts[account.account_id] = account

    def create(self, name: str, account_id: str, balance: float) -> BankAccount:
        """Build a new account, register it and return it."""
        account = BankAccount(name, account_id, balance)
        self.add(account)
        return account

    def remove(self, account_id: str) -> BankAccount:
        """Unregister the account with this identifier and return it."""
        account = self._require(account_id)
        del self._accounts[account_id]
        return account

    def get(self, account_id: str) -> BankAccount | None:
        """Return the account with this identifier, or None when there is none."""
        if not account_id:
            raise BankError("Account ID cannot be empty")
        return self._accounts.get(account_id)

    def all_accounts(self) -> list[BankAccount]:
        return list(self._accounts.values())

    def _require(self, account_id: str) -> BankAccount:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError("Account not found")
        return account

    def withdraw(self, account_id: str, amount: float) -> None:
        self._require(account_id).withdraw(amount)

    def deposit(self, account_id: str, amount: float) -> None:
        self._require(account_id).deposit(amount)