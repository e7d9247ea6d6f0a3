# casheer

The core of a personal budgeting service. It models monthly budget entries, the
expenses charged against them, and debts owed to or by other people. Every
amount is held as an integer in a named currency together with a decimal
exponent.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Contents

- `casheer.currency`: the frozen dataclass `Value` (`currency`, `amount`,
  `exponent`), the supported currency codes (EUR, RON, USD, BTC, GBP), and the
  constructors `new_value`, `new_value_based_on_minor_currency` (the exponent
  defaults to -2), `usd_value`, `eur_value` and `ron_value`. `validate_currency`
  and the checking constructors raise `InvalidCurrencyError` for an unknown
  code.
- `casheer.domain`: `Debt`, `Entry` and `Expense`, with the validating
  constructors `new_debt`, `new_entry` and `new_scratch_expense`, and
  `new_month` for checking a month number. An `Entry` holds its expenses.
  `Entry.add_expense` and `Entry.modify_expense` record each change as an
  `ExpenseChangedEvent`. `Entry.delete_expense` removes an expense. Both
  `modify_expense` and `delete_expense` raise `MissingExpenseError` when the
  entry has no expense with that id. Validation failures raise
  `InvalidDebtError`, `InvalidEntryError` or `InvalidExpenseError`. Each of
  these keeps every problem it found in its `errors` attribute.
- `casheer.config`: `new_initialized_config(environ=None)` builds a `Config`
  (server, SQLite database and API paths) from `CASHEER_*` variables. It reads
  `os.environ` unless you pass a mapping, and uses defaults for any variable
  that is not set. A `CASHEER_SERVER_PORT` that is not an integer falls back to
  8033.
- `casheer.apierrors`: `ApiError`, which has a title, an HTTP status and a
  detail, plus factory functions for each error document. `ApiError.to_response()`
  returns the JSON body as a dict.
- `casheer.errors`: internal exceptions for request handling, such as
  `MissingContextParamError`, `InvalidContextParamTypeError`,
  `InvalidModelResourceError`, `InvalidQueryParamsError` and
  `InvalidJsonBodyError`.
- `casheer.dbstore`: `DbStore`, which reads debts from an SQLite file.
  `list_debts` and `load_debt` skip deleted rows, and `load_debt` raises
  `NotFoundError` when there is no match. The store also has `healthcheck` and
  `close`, and works as a context manager.
- `casheer.links`: builders for the hypermedia links and bodies used in API
  responses: `default_links`, `home_link`, `ping_response`, `debt_self_link`,
  `entry_self_link`, `entry_expenses_link`, `expense_self_link`. It also has
  `compute_running_total`, which sums the amounts of a list of expenses.

## Example

```python
from casheer.currency import eur_value
from casheer.domain import new_entry, new_scratch_expense
from casheer.links import compute_running_total, entry_self_link

entry = new_entry(10, 2023, "food", "groceries", False, eur_value(50000))
entry.add_expense(new_scratch_expense("market", "weekly shop", "card", eur_value(4250)))
print(compute_running_total(entry.expenses))  # 4250
print(entry_self_link("http://localhost:8033/api/entries/", 7))
# http://localhost:8033/api/entries/7
```

Invalid input raises an exception. For example,
`new_entry(13, 2023, "", "", False, value)` raises `InvalidEntryError`, and
that error lists each of the three problems it found.

## What it does not do

The package has no HTTP server, no routes and no command to run. It has no
client for a running service either. `DbStore` only reads debts: it does not
create the database schema, and it does not write debts, entries or expenses.
The configuration describes where a server would listen, but nothing in the
package listens there.