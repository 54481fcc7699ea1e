"""Books, users, dates and library lending."""