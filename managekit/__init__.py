"""Bank account and library lending managers, plus a balanced-bracket checker."""

__version__ = "0.1.0"