# managekit

This package provides small in-memory managers for two record-keeping jobs and one utility function:

- **`managekit.bank`** handles bank accounts, deposits, withdrawals, transfers and a
  transaction history for each account.
- **`managekit.library`** handles books with copy counts, library users, and borrowing and
  returning between them.
- **`managekit.parentheses`** checks whether the brackets in a string are balanced.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Bank

```python
from managekit.bank.bank_manager import BankManager
from managekit.bank.errors import InsufficientFundsError

bank = BankManager()
bank.create_account("John Doe", "12345", 1000.0)
bank.create_account("Jane Roe", "67890", 50.0)

bank.deposit("12345", 500.0)
bank.withdraw("12345", 300.0)
bank.transfer("12345", "67890", 200.0)

print(bank.get_account("67890").balance)   # 250.0
for transaction in bank.transactions_for("12345"):
    print(transaction.describe())

try:
    bank.withdraw("67890", 10_000.0)
except InsufficientFundsError as error:
    print(error)
```

`BankManager` provides the following methods:

- `create_account` and `delete_account`.
- `deposit`, `withdraw` and `transfer`. Each successful movement is recorded as a
  transaction.
- `get_account`, which returns `None` for an unknown id.
- `list_accounts`.
- `transactions_for`, which raises `BankError` if the account has no recorded
  transactions.

You can also use the building blocks on their own:

- `BankAccount` is in `managekit.bank.account`. It has the properties `name`,
  `account_id` and `balance`. `name` can be set, and must be at least three
  characters long. The methods are `deposit`, `withdraw` and `describe`. A new account
  needs a non-empty name of at least three characters, a non-empty id and a
  non-negative balance. Amounts must be positive.
- `AccountManager` is in `managekit.bank.account_manager`. It stores accounts by id and
  provides `add`, `create`, `remove`, `get`, `all_accounts`, `deposit` and `withdraw`.
  It also supports `in` and `len()`.
- `Transaction` and `TransactionType` are in `managekit.bank.transaction`. A
  `Transaction` records one positive deposit or withdrawal amount. It has a 16-bit
  `transaction_id` that increases and wraps around, and a local `timestamp`.
- `TransactionManager` is in `managekit.bank.transaction_manager`. It provides `record`
  and `transactions_for`, and keeps the history of each account, oldest first.

Every error is a subclass of `BankError`. The subclasses are `AccountNotFoundError`,
`AccountAlreadyExistsError` and `InsufficientFundsError`.

## Library

```python
from managekit.library.dates import Date
from managekit.library.library_manager import LibraryManager

library = LibraryManager()
library.create_user("alice", Date(14, 3, 1990))
library.add_book("Dune", "Frank Herbert", 1965)

library.borrow_book("alice", "Dune")
print(library.books.get("Dune").available_copies)   # 0
library.return_book("alice", "Dune")
library.remove_book("Dune")
```

`LibraryManager` exposes its catalogue and its member registry through the `books` and
`users` properties.

Lower-level pieces:

- `Book` is in `managekit.library.book`. It tracks total and available copies, and
  provides `add_copies`, `remove_copies`, `borrow`, `give_back` and `describe`. Only
  copies that are on the shelf can be removed. Publication years must fall between 850
  and 2025.
- `BookManager` is in `managekit.library.book_manager`.
  - It stores books by title with `create_book` and `delete_book`. A title cannot be
    deleted while any copy is on loan.
  - It looks up books with `get` and `describe`.
  - It searches with `search_by_author` and `search_by_year`.
  - It lists with `titles`, `books`, `borrowed_books` and `describe_all`.
  - It counts with `total_copies` and `unique_count`.
- `User` is in `managekit.library.user`. It keeps the titles a member has borrowed, and a
  member cannot borrow the same title twice.
- `UserManager` is in `managekit.library.user_manager`. It stores users by name and
  provides `create_user`, `remove_user`, `get`, `exists`, `borrow`, `give_back`,
  `borrowed_books`, `names`, `users`, `describe`, `describe_all` and `len()`.
- `Date` is in `managekit.library.dates`. It is a frozen day/month/year value and prints
  as `day/month/year`. Its `is_valid` method accepts days 1 to 31, months 1 to 12 and
  years 1900 to 2025. Users can only be created with a valid birth date.

Every error is a subclass of `BookError`. The subclasses are `EmptyTitleError`,
`EmptyAuthorError` and `PublicationYearError`.

## Balanced brackets

```python
from managekit.parentheses import is_balanced

is_balanced("({[]})")   # True
is_balanced("){}{}[]")  # False
```

Only `()`, `{}` and `[]` are checked. All other characters are ignored.

## What it does not do

managekit is a library only:

- There is no command-line program, server or user interface.
- All state lives in the manager objects for as long as they exist. Nothing is saved to
  or loaded from disk or a database.