"""Set-Cookie parsing and cookie categorization."""
