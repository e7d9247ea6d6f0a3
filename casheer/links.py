"""Hypermedia links and summary values used in API responses."""

from __future__ import annotations

from typing import Any, Iterable
from urllib.parse import urlsplit, urlunsplit

from casheer.domain import Expense

_HOME_TITLE = "Home page of casheer API."
_WELCOME = (
    "Welcome to the casheer api application. "
    "Navigate to one of the following links for further action."
)


def _clean(path: str) -> str:
    """Lexically normalise a slash-separated path."""
    if path == "":
        return "."
    rooted = path.startswith("/")
    segments: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments and segments[-1] != "..":
                segments.pop()
            elif not rooted:
                segments.append("..")
            continue
        segments.append(part)
    joined = "/".join(segments)
    if rooted:
        return "/" + joined
    return joined or "."


def _join(*elements: str) -> str:
    non_empty = [element for element in elements if element]
    if not non_empty:
        return ""
    return _clean("/".join(non_empty))


def _join_path(url: str, *elements: str) -> str:
    """Append path elements to a URL, normalising the resulting path.

    A trailing slash on the last element is kept.
    """
    parts = urlsplit(url)
    all_elements = [parts.path, *elements]
    if not all_elements[0].startswith("/"):
        all_elements[0] = "/" + all_elements[0]
        path = _join(*all_elements)[1:]
    else:
        path = _join(*all_elements)
    if all_elements[-1].endswith("/") and not path.endswith("/"):
        path += "/"
    return urlunsplit(parts._replace(path=path))


def default_links(base_url: str) -> dict[str, str]:
    """Links present in every response: the API home."""
    parts = urlsplit(base_url)
    return {"home": urlunsplit(parts._replace(path="/api/"))}


def home_link(base_url: str) -> dict[str, str]:
    """A titled link to the home page below the given URL."""
    return {"href": _join_path(base_url, "home"), "title": _HOME_TITLE}


def ping_response() -> dict[str, Any]:
    """The body returned from the API root."""
    return {
        "info": _WELCOME,
        "links": {
            "entries": {"href": "entries/", "details": "Manage entities."},
            "debts": {"href": "debts/", "details": "Manage debts."},
            "totals": {"href": "totals/", "details": "Manage totals."},
        },
    }


def compute_running_total(expenses: Iterable[Expense]) -> int:
    """Sum of the amounts of the given expenses."""
    return sum(expense.value.amount for expense in expenses)


def debt_self_link(debts_url: str, debt_id: int) -> str:
    """The URL of a single debt."""
    return _join_path(debts_url, str(debt_id))


def entry_self_link(entries_url: str, entry_id: int) -> str:
    """The URL of a single entry."""
    return _join_path(entries_url, str(entry_id))


def entry_expenses_link(entries_url: str, entry_id: int) -> str:
    """The URL of the expense collection of an entry."""
    return _join_path(entries_url, str(entry_id), "expenses/")


def expense_self_link(entries_url: str, entry_id: int, expense_id: int) -> str:
    """The URL of a single expense of an entry."""
    return _join_path(entries_url, str(entry_id), "expenses", str(expense_id))