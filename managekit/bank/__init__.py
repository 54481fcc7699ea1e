"""Bank accounts, transactions and their managers."""