"""SQLite-backed storage for debts."""

from __future__ import annotations

import re
import sqlite3
from datetime import datetime, timezone
from types import TracebackType
from typing import Any

from casheer.currency import Value
from casheer.domain import Debt

_FRACTION = re.compile(r"(\.\d{6})\d+")

_LIST_DEBTS = """
    SELECT
        id, person, amount, currency, exponent, details, created_at, updated_at
    FROM
        debts
    WHERE
        deleted_at IS NULL
    ORDER BY
        person ASC, amount DESC, id ASC;
"""

_LOAD_DEBT = """
    SELECT
        id, person, amount, currency, exponent, details, created_at, updated_at
    FROM
        debts
    WHERE
        id = :id
    AND
        deleted_at IS NULL;
"""


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""

    def __init__(self, details: str, orig: Exception | None = None) -> None:
        self.details = details
        self.orig = orig
        super().__init__(details)


def _parse_timestamp(raw: Any) -> datetime | None:
    """Turn a stored timestamp into an aware datetime (UTC when unspecified)."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, (int, float)):
        return datetime.fromtimestamp(raw, timezone.utc)
    else:
        if isinstance(raw, bytes):
            raw = raw.decode()
        text = str(raw).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        text = _FRACTION.sub(r"\1", text)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as err:
            raise ValueError(f"scanning debt row: invalid timestamp {raw!r}") from err
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _row_to_debt(row: sqlite3.Row | tuple[Any, ...]) -> Debt:
    debt_id, person, amount, currency, exponent, details, created_at, updated_at = row
    return Debt(
        id=debt_id,
        created_at=_parse_timestamp(created_at),
        updated_at=_parse_timestamp(updated_at),
        person=person,
        details=details if details is not None else "",
        value=Value(currency=currency, amount=amount, exponent=exponent),
    )


class DbStore:
    """Read access to debts kept in an SQLite database file."""

    def __init__(self, path: str) -> None:
        self._conn = sqlite3.connect(path)

    def __enter__(self) -> DbStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def list_debts(self) -> list[Debt]:
        """All debts not deleted, by person, then largest amount, then id."""
        rows = self._conn.execute(_LIST_DEBTS).fetchall()
        return [_row_to_debt(row) for row in rows]

    def load_debt(self, debt_id: int) -> Debt:
        """The debt with the given id; raises NotFoundError if there is none."""
        row = self._conn.execute(_LOAD_DEBT, {"id": debt_id}).fetchone()
        if row is None:
            raise NotFoundError(f"debt with id {debt_id} not found")
        return _row_to_debt(row)

    def healthcheck(self) -> None:
        """Raise if the database cannot be reached."""
        self._conn.execute("SELECT 1;").fetchone()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()