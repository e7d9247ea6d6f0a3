"""Error documents returned to API clients."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote_ascii(text: str) -> str:
    """Double-quote text, escaping everything outside printable ASCII."""
    parts = []
    for char in text:
        code = ord(char)
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif 0x20 <= code < 0x7F:
            parts.append(char)
        elif code < 0x80:
            parts.append(f"\\x{code:02x}")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


@dataclass
class ApiError(Exception):
    """An error with a title, an HTTP status and a detail message."""

    title: str
    status: int
    detail: str

    def __post_init__(self) -> None:
        super().__init__(self.title, self.status, self.detail)

    def __str__(self) -> str:
        return f"{self.title} ({self.status}): {self.detail}"

    def to_response(self) -> dict[str, Any]:
        """The JSON body sent to the client for this error."""
        return {
            "error": {
                "title": self.title,
                "status": self.status,
                "detail": self.detail,
            }
        }


def invalid_url_error(detail: str) -> ApiError:
    return ApiError("Invalid URL", HTTPStatus.BAD_REQUEST, detail)


def invalid_url_no_trailing_slash_error() -> ApiError:
    return ApiError("Invalid URL", HTTPStatus.BAD_REQUEST, "Please add a trailing slash.")


def request_binding_error(detail: str) -> ApiError:
    return ApiError("Invalid JSON Body", HTTPStatus.BAD_REQUEST, detail)


def query_params_binding_error(detail: str) -> ApiError:
    return ApiError("Invalid Query Params", HTTPStatus.BAD_REQUEST, detail)


def missing_context_param_error(detail: str) -> ApiError:
    return ApiError("Missing Context Parameter", HTTPStatus.INTERNAL_SERVER_ERROR, detail)


def invalid_context_param_error(detail: str) -> ApiError:
    return ApiError("Invalid Context Parameter", HTTPStatus.INTERNAL_SERVER_ERROR, detail)


def missing_param_error(missing_param: str) -> ApiError:
    return ApiError(
        "Missing URL Parameter",
        HTTPStatus.BAD_REQUEST,
        f"Missing URL parameter: {_quote_ascii(missing_param)}",
    )


def invalid_param_type_error(param_name: str) -> ApiError:
    return ApiError(
        "Invalid URL Parameter",
        HTTPStatus.BAD_REQUEST,
        f"URL parameter {_quote_ascii(param_name)} is not an integer.",
    )


def unknown_error(detail: str) -> ApiError:
    return ApiError(
        "Unknown Error",
        HTTPStatus.INTERNAL_SERVER_ERROR,
        f"An unknown error occured: {detail}",
    )


def not_found_error() -> ApiError:
    return ApiError("Resource Not Found", HTTPStatus.NOT_FOUND, "Resource was not found.")


def invalid_resource_error(detail: str) -> ApiError:
    return ApiError("Invalid Resource", HTTPStatus.UNPROCESSABLE_ENTITY, detail)


def already_exists_error(detail: str) -> ApiError:
    return ApiError("Resource Already Exists", HTTPStatus.CONFLICT, detail)


def create_entry_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Create Entry Failed", status, detail)


def delete_entry_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Delete Entry Failed", status, detail)


def list_entry_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("List Entry Failed", status, detail)


def update_entry_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Update Entry Failed", status, detail)


def get_entry_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Get Entry Failed", status, detail)


def create_expense_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Create Expense Failed", status, detail)


def delete_expense_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Delete Expense Failed", status, detail)


def list_expense_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("List Expense Failed", status, detail)


def update_expense_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Update Expense Failed", status, detail)


def get_expense_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Get Expense Failed", status, detail)


def invalid_entry_error(detail: str) -> ApiError:
    return ApiError("Operation Failed", HTTPStatus.BAD_REQUEST, detail)


def get_running_total_failed_error(status: int, detail: str) -> ApiError:
    return ApiError("Get Running Total Failed", status, detail)