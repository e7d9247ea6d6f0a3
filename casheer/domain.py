"""Domain models: debts, entries and the expenses that belong to entries."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from casheer.currency import Value

MISSING_DEBT_PERSON = "person must not be empty"
EMPTY_ENTRY_CATEGORY = "category must not be empty"
EMPTY_ENTRY_SUBCATEGORY = "subcategory must not be empty"
EMPTY_EXPENSE_NAME = "expense must have a name"
INVALID_MONTH_NUMBER = "month must be between 1 and 12"
MISSING_EXPENSE = "the expense is not part of the aggregate"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InvalidMonthError(ValueError):
    """Raised for a month number outside 1..12."""

    def __init__(self, message: str = INVALID_MONTH_NUMBER) -> None:
        super().__init__(message)


class InvalidModelError(ValueError):
    """A validation failure that carries every underlying problem."""

    def __init__(self, errors: Iterable[Exception]) -> None:
        self.errors: tuple[Exception, ...] = tuple(errors)
        super().__init__(";".join(str(err) for err in self.errors))


class InvalidDebtError(InvalidModelError):
    """Raised when a debt fails validation."""


class InvalidEntryError(InvalidModelError):
    """Raised when an entry fails validation."""


class InvalidExpenseError(InvalidModelError):
    """Raised when an expense fails validation."""


class MissingExpenseError(LookupError):
    """Raised when an expense is not part of an entry."""

    def __init__(self, message: str = MISSING_EXPENSE) -> None:
        super().__init__(message)


def new_month(month: int) -> int:
    """Return the month number, or raise InvalidMonthError."""
    if not 1 <= month <= 12:
        raise InvalidMonthError()
    return month


@dataclass(kw_only=True)
class BaseModel:
    """Identity and timestamps shared by all models."""

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(kw_only=True)
class Debt(BaseModel):
    """A debt owed to or held by someone."""

    person: str
    details: str
    value: Value


@dataclass(kw_only=True)
class Expense(BaseModel):
    """An expense associated with an entry."""

    name: str
    description: str
    payment_method: str
    value: Value


class ExpenseStatus(str, enum.Enum):
    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True)
class ExpenseChangedEvent:
    data: Expense
    status: ExpenseStatus


@dataclass(kw_only=True)
class Entry(BaseModel):
    """An entry holding zero or more expenses; the aggregate root."""

    month: int
    year: int
    category: str
    subcategory: str
    recurring: bool
    value: Value
    expenses: list[Expense] = field(default_factory=list)
    expenses_changed: list[ExpenseChangedEvent] = field(default_factory=list)

    def add_expense(self, expense: Expense) -> None:
        """Append an expense and record its creation."""
        self.expenses.append(expense)
        self.expenses_changed.append(
            ExpenseChangedEvent(data=expense, status=ExpenseStatus.CREATED)
        )

    def modify_expense(self, expense: Expense) -> None:
        """Replace the expense with the same id and record the change."""
        for position, existing in enumerate(self.expenses):
            if existing.id == expense.id:
                self.expenses[position] = expense
                self.expenses_changed.append(
                    ExpenseChangedEvent(data=expense, status=ExpenseStatus.MODIFIED)
                )
                return
        raise MissingExpenseError()

    def delete_expense(self, expense: Expense) -> None:
        """Remove the expense with the same id."""
        position = next(
            (pos for pos, existing in enumerate(self.expenses) if existing.id == expense.id),
            None,
        )
        if position is None:
            raise MissingExpenseError()
        del self.expenses[position]


def new_debt(person: str, details: str, value: Value) -> Debt:
    """Create a validated debt."""
    errors: list[Exception] = []
    if person == "":
        errors.append(ValueError(MISSING_DEBT_PERSON))
    if errors:
        raise InvalidDebtError(errors)
    return Debt(person=person, details=details, value=value, created_at=_now())


def new_entry(
    month: int,
    year: int,
    category: str,
    subcategory: str,
    recurring: bool,
    value: Value,
) -> Entry:
    """Create a validated entry with no expenses."""
    errors: list[Exception] = []
    try:
        new_month(month)
    except InvalidMonthError as err:
        errors.append(err)
    if category == "":
        errors.append(ValueError(EMPTY_ENTRY_CATEGORY))
    if subcategory == "":
        errors.append(ValueError(EMPTY_ENTRY_SUBCATEGORY))
    if errors:
        raise InvalidEntryError(errors)
    return Entry(
        month=month,
        year=year,
        category=category,
        subcategory=subcategory,
        recurring=recurring,
        value=value,
        created_at=_now(),
    )


def new_scratch_expense(
    name: str, description: str, payment_method: str, value: Value
) -> Expense:
    """Create a validated expense not yet attached to anything."""
    errors: list[Exception] = []
    if name == "":
        errors.append(ValueError(EMPTY_EXPENSE_NAME))
    if errors:
        raise InvalidExpenseError(errors)
    return Expense(
        name=name,
        description=description,
        payment_method=payment_method,
        value=value,
        created_at=_now(),
    )