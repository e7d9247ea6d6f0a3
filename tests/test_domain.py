import dataclasses

import pytest

from casheer.currency import eur_value, usd_value
from casheer.domain import (
    Entry,
    ExpenseStatus,
    InvalidDebtError,
    InvalidEntryError,
    InvalidExpenseError,
    InvalidModelError,
    InvalidMonthError,
    MissingExpenseError,
    new_debt,
    new_entry,
    new_month,
    new_scratch_expense,
)


@pytest.fixture
def entry() -> Entry:
    return new_entry(10, 2023, "category", "subcategory", False, eur_value(5000))


def make_expense(expense_id, name="myexpense"):
    expense = new_scratch_expense(name, "mydescription", "card", eur_value(100))
    return dataclasses.replace(expense, id=expense_id)


@pytest.mark.parametrize("month", [1, 6, 12])
def test_new_month_accepts_valid(month):
    assert new_month(month) == month


@pytest.mark.parametrize("month", [0, 13, -10])
def test_new_month_rejects_invalid(month):
    with pytest.raises(InvalidMonthError) as info:
        new_month(month)
    assert str(info.value) == "month must be between 1 and 12"


def test_new_debt_keeps_fields():
    debt = new_debt("John", "", eur_value(5000))
    assert (debt.person, debt.details, debt.value) == ("John", "", eur_value(5000))
    assert debt.created_at is not None and debt.id == 0


def test_new_debt_requires_person():
    with pytest.raises(InvalidDebtError) as info:
        new_debt("", "details", eur_value(5000))
    assert str(info.value) == "person must not be empty"
    assert isinstance(info.value, InvalidModelError)


def test_new_entry_keeps_fields(entry):
    assert (entry.month, entry.year) == (10, 2023)
    assert entry.category == "category"
    assert entry.subcategory == "subcategory"
    assert entry.expenses == []
    assert entry.expenses_changed == []


def test_new_entry_collects_all_errors():
    with pytest.raises(InvalidEntryError) as info:
        new_entry(13, 2000, "", "", False, eur_value(5000))
    messages = [str(err) for err in info.value.errors]
    assert messages == [
        "month must be between 1 and 12",
        "category must not be empty",
        "subcategory must not be empty",
    ]
    assert str(info.value) == ";".join(messages)
    assert isinstance(info.value.errors[0], InvalidMonthError)


def test_new_scratch_expense_requires_name():
    with pytest.raises(InvalidExpenseError) as info:
        new_scratch_expense("", "desc", "card", usd_value(1000))
    assert str(info.value) == "expense must have a name"


def test_add_expense_records_event(entry):
    expense = make_expense(1)
    entry.add_expense(expense)
    assert entry.expenses == [expense]
    assert entry.expenses_changed[0].data == expense
    assert entry.expenses_changed[0].status is ExpenseStatus.CREATED


def test_modify_expense_replaces_by_id(entry):
    entry.add_expense(make_expense(1))
    entry.add_expense(make_expense(2))
    changed = make_expense(2, name="renamed")
    entry.modify_expense(changed)
    assert entry.expenses[1].name == "renamed"
    assert entry.expenses[0].name == "myexpense"
    assert entry.expenses_changed[-1].status is ExpenseStatus.MODIFIED
    assert len(entry.expenses_changed) == 3


def test_modify_missing_expense_raises(entry):
    with pytest.raises(MissingExpenseError) as info:
        entry.modify_expense(make_expense(99))
    assert str(info.value) == "the expense is not part of the aggregate"


def test_delete_expense_removes_it(entry):
    entry.add_expense(make_expense(1))
    entry.add_expense(make_expense(2))
    entry.delete_expense(make_expense(1))
    assert [exp.id for exp in entry.expenses] == [2]


def test_delete_missing_expense_raises(entry):
    entry.add_expense(make_expense(1))
    with pytest.raises(MissingExpenseError):
        entry.delete_expense(make_expense(5))
    assert len(entry.expenses) == 1


def test_recorded_event_status_values(entry):
    entry.add_expense(make_expense(1))
    entry.modify_expense(make_expense(1, name="renamed"))
    assert [event.status.value for event in entry.expenses_changed] == [
        "created",
        "modified",
    ]