"""Deposits and withdrawals recorded against accounts."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass, field
from datetime import datetime

from managekit.bank.errors import BankError

_ID_MODULUS = 1 << 16
_ids = itertools.count(1)


class TransactionType(enum.Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


@dataclass
class Transaction:
    """A positive amount moved into or out of an account, stamped with an id and time."""

    amount: float
    kind: TransactionType
    transaction_id: int = field(init=False)
    timestamp: datetime = field(init=False)

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise BankError(
                "Transaction : amount to deposit or withdraw must be 5 euros or more"
            )
        # Identifiers are 16-bit and wrap around.
        self.transaction_id = next(_ids) % _ID_MODULUS
        self.timestamp = datetime.now()

    def describe(self) -> str:
        """Return a human-readable summary of the transaction."""
        label = "DEPOSIT" if self.kind is TransactionType.DEPOSIT else "WITHDRAWAL"
        return (
            f"Transaction ID : {self.transaction_id}\n"
            f"Type : {label}\n"
            f"Amount : {self.amount:g}\n"
            f"Timestamp: {self.timestamp.ctime()}"
        )