"""Per-account history of transactions."""

from __future__ import annotations

from collections import defaultdict

from managekit.bank.errors import BankError
from managekit.bank.transaction import Transaction


class TransactionManager:
    """Keeps the transactions of each account in the order they were recorded."""

    def __init__(self) -> None:
        self._history: defaultdict[str, list[Transaction]] = defaultdict(list)

    def record(self, account_id: str, transaction: Transaction) -> None:
        if not account_id:
            raise BankError("Account ID cannot be empty")
        self._history[account_id].append(transaction)

    def transactions_for(self, account_id: str) -> list[Transaction]:
        """Return the account's transactions, oldest first."""
        if not account_id:
            raise BankError("Account ID cannot be empty")
        if account_id not in self._history:
            raise BankError("No transactions found for this account")
        return list(self._history[account_id])