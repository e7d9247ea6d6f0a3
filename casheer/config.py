"""Application configuration read from environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping

SQLITE_DB = "sqlite"
POSTGRES_DB = "postgres"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class SQLiteDatabase:
    file: str
    migration: str


@dataclass(frozen=True)
class Server:
    scheme: str
    address: str
    port: int


@dataclass(frozen=True)
class ApiPaths:
    entries: str
    expenses: str
    debts: str
    totals: str


@dataclass(frozen=True)
class Config:
    server: Server
    sqlite_database: SQLiteDatabase
    api_paths: ApiPaths


def _string(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name, default)


def _int32(environ: Mapping[str, str], name: str, default: int) -> int:
    """Return the variable as a 32-bit int, or the default if unset or invalid."""
    raw = environ.get(name)
    if raw is None or not _INTEGER.fullmatch(raw):
        return default
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return default
    return (value + 2**31) % 2**32 - 2**31


def new_initialized_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build the configuration from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    return Config(
        server=Server(
            scheme=_string(env, "CASHEER_SERVER_SCHEME", "http"),
            address=_string(env, "CASHEER_SERVER_ADDRESS", "127.0.0.1"),
            port=_int32(env, "CASHEER_SERVER_PORT", 8033),
        ),
        sqlite_database=SQLiteDatabase(
            file=_string(env, "CASHEER_SQLITE_FILE", "casheer.db"),
            migration=_string(env, "CASHEER_SQLITE_MIGRATION", "./scripts/sqlite"),
        ),
        api_paths=ApiPaths(
            entries=_string(env, "CASHEER_APIPATHS_ENTRIES", "entries/"),
            expenses=_string(env, "CASHEER_APIPATHS_EXPENSES", "expenses/"),
            debts=_string(env, "CASHEER_APIPATHS_DEBTS", "debts/"),
            totals=_string(env, "CASHEER_APIPATHS_TOTALS", "totals/"),
        ),
    )