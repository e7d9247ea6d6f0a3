from urllib.parse import urlsplit

import pytest

from casheer.currency import eur_value, usd_value
from casheer.domain import Expense
from casheer.links import (
    compute_running_total,
    debt_self_link,
    default_links,
    entry_expenses_link,
    entry_self_link,
    expense_self_link,
    home_link,
    ping_response,
)

BASE = "http://localhost:69/doesnt/matter"
ENTRIES = "http://localhost:8033/api/entries/"


def _expense(value):
    return Expense(name="e", description="", payment_method="", value=value)


def test_default_links_replace_path_with_api_root():
    home = default_links(BASE)["home"]
    parts = urlsplit(home)
    assert parts.path == "/api/"
    assert parts.netloc == urlsplit(BASE).netloc
    assert parts.scheme == urlsplit(BASE).scheme


def test_default_links_keep_query():
    home = default_links(BASE + "?a=b")["home"]
    assert urlsplit(home).query == "a=b"


def test_home_link_title_and_href():
    link = home_link(BASE)
    assert link["title"] == "Home page of casheer API."
    assert link["href"] == BASE + "/home"


def test_home_link_on_base_with_trailing_slash():
    base = "http://localhost:8033/api/"
    assert home_link(base)["href"] == base + "home"


def test_ping_response_links():
    response = ping_response()
    assert response["info"].startswith("Welcome to the casheer api application.")
    assert response["links"]["entries"]["href"] == "entries/"
    assert response["links"]["debts"]["href"] == "debts/"
    assert response["links"]["totals"]["href"] == "totals/"
    assert response["links"]["debts"]["details"] == "Manage debts."


def test_running_total_of_nothing_is_zero():
    assert compute_running_total([]) == 0


def test_running_total_single_expense_is_its_amount():
    assert compute_running_total([_expense(eur_value(1000))]) == 1000


def test_running_total_is_additive():
    first = [_expense(eur_value(1000)), _expense(usd_value(500))]
    second = [_expense(eur_value(100))]
    assert compute_running_total(first + second) == (
        compute_running_total(first) + compute_running_total(second)
    )


@pytest.mark.parametrize("debt_id", [1, 42, 12345])
def test_debt_self_link_appends_id(debt_id):
    assert debt_self_link(BASE, debt_id) == BASE + "/" + str(debt_id)
    assert debt_self_link(BASE + "/", debt_id) == BASE + "/" + str(debt_id)


def test_entry_self_link_on_collection_with_trailing_slash():
    assert entry_self_link(ENTRIES, 3) == ENTRIES + "3"


def test_entry_expenses_link_keeps_trailing_slash():
    link = entry_expenses_link(ENTRIES, 3)
    assert link == ENTRIES + "3/expenses/"
    assert link.endswith("/")


def test_expense_self_link():
    assert expense_self_link(ENTRIES, 3, 9) == ENTRIES + "3/expenses/9"
    assert expense_self_link(BASE, 3, 9) == BASE + "/3/expenses/9"


def test_links_are_under_their_collection():
    for link in (
        entry_self_link(ENTRIES, 5),
        entry_expenses_link(ENTRIES, 5),
        expense_self_link(ENTRIES, 5, 6),
    ):
        assert link.startswith(ENTRIES)
        assert urlsplit(link).netloc == urlsplit(ENTRIES).netloc