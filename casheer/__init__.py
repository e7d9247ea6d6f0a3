"""Budget entries, expenses and debts with currency-aware values, plus configuration, error documents, links and a read-only SQLite debt store."""

__version__ = "0.1.0"