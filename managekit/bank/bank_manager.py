"""Bank front end combining accounts and their transaction history."""

from __future__ import annotations

from managekit.bank.account import BankAccount
from managekit.bank.account_manager import AccountManager
from managekit.bank.errors import BankError
from managekit.bank.transaction import Transaction, TransactionType
from managekit.bank.transaction_manager import TransactionManager


class BankManager:
    """Opens and closes accounts, moves money and records every movement."""

    def __init__(self) -> None:
        self._accounts = AccountManager()
        self._transactions = TransactionManager()

    @staticmethod
    def _check_id(account_id: str) -> None:
        if not account_id:
            raise BankError("ID cannot be empty")

    def create_account(self, name: str, account_id: str, balance: float) -> BankAccount:
        if not name or not account_id:
            raise BankError("name or ID cannot be empty")
        return self._accounts.create(name, account_id, balance)

    def delete_account(self, account_id: str) -> None:
        self._check_id(account_id)
        self._accounts.remove(account_id)

    def withdraw(self, account_id: str, amount: float) -> None:
        self._check_id(account_id)
        self._accounts.withdraw(account_id, amount)
        self._transactions.record(account_id, Transaction(amount, TransactionType.WITHDRAW))

    def deposit(self, account_id: str, amount: float) -> None:
        self._check_id(account_id)
        self._accounts.deposit(account_id, amount)
        self._transactions.record(account_id, Transaction(amount, TransactionType.DEPOSIT))

    def transfer(self, source_id: str, target_id: str, amount: float) -> None:
        """Withdraw from one account, then deposit the same amount into another."""
        if not source_id or not target_id:
            raise BankError("ID cannot be empty")
        self._accounts.withdraw(source_id, amount)
        self._transactions.record(source_id, Transaction(amount, TransactionType.WITHDRAW))
        self._accounts.deposit(target_id, amount)
        self._transactions.record(target_id, Transaction(amount, TransactionType.DEPOSIT))

    def list_accounts(self) -> list[BankAccount]:
        return self._accounts.all_accounts()

    def transactions_for(self, account_id: str) -> list[Transaction]:
        return self._transactions.transactions_for(account_id)

    def get_account(self, account_id: str) -> BankAccount | None:
        return self._accounts.get(account_id)