"""Shared pytest fixtures and test doubles for popmelt tests.

``FakeSupabase`` mimics the slice of the supabase-py query builder the store
adapter uses (``table().select/insert/update/delete``, ``eq``, ``ilike``,
``contains``, ``single``, ``execute``) over in-memory rows, including the
``PGRST116`` error PostgREST raises when ``.single()`` matches no row.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from collections.abc import Callable, Generator, Iterable
from dataclasses import dataclass
from typing import Any

import pytest
from click.testing import CliRunner
from postgrest.exceptions import APIError

from popmelt.config.settings import PopmeltSettings
from popmelt.domain.samples import SAMPLE_TALENTS
from popmelt.infrastructure.backend import Backend
from popmelt.infrastructure.store import TalentStore

FAKE_URL = "https://abcdefgh.supabase.co"
FAKE_KEY = "test-service-key-1234567890"
STORE_TIMESTAMP = "2025-04-01T12:00:00.000Z"


# ---------------------------------------------------------------------------
# Fake Supabase client
# ---------------------------------------------------------------------------


@dataclass
class FakeResponse:
    data: Any


def _like_regex(pattern: str) -> re.Pattern[str]:
    """Compile an ilike pattern the way PostgREST and Postgres evaluate it.

    PostgREST turns ``*`` into ``%``. Postgres then reads ``%`` and ``_`` as
    wildcards and ``\\`` as the escape character.
    """
    parts: list[str] = []
    chars = iter(pattern.replace("*", "%"))
    for ch in chars:
        if ch == "\\":
            parts.append(re.escape(next(chars, "\\")))
        elif ch == "%":
            parts.append(".*")
        elif ch == "_":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def _resolve(row: dict[str, Any], column: str) -> Any:
    value: Any = row
    for part in column.split("->"):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class FakeQuery:
    """One chained request against a FakeTable."""

    def __init__(self, table: FakeTable, action: str, payload: Any = None) -> None:
        self._table = table
        self._action = action
        self._payload = payload
        self._filters: list[Callable[[dict[str, Any]], bool]] = []
        self._single = False

    def eq(self, column: str, value: Any) -> FakeQuery:
        self._table.calls.append(("eq", column, value))
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def ilike(self, column: str, pattern: str) -> FakeQuery:
        self._table.calls.append(("ilike", column, pattern))
        regex = _like_regex(pattern)

        def check(row: dict[str, Any]) -> bool:
            actual = row.get(column)
            return actual is not None and regex.fullmatch(str(actual)) is not None

        self._filters.append(check)
        return self

    def contains(self, column: str, value: Any) -> FakeQuery:
        self._table.calls.append(("contains", column, value))
        expected = json.loads(value) if isinstance(value, str) else list(value)

        def check(row: dict[str, Any]) -> bool:
            actual = _resolve(row, column)
            return isinstance(actual, list) and all(item in actual for item in expected)

        self._filters.append(check)
        return self

    def single(self) -> FakeQuery:
        self._single = True
        return self

    def _matching(self) -> list[dict[str, Any]]:
        return [row for row in self._table.rows if all(f(row) for f in self._filters)]

    def execute(self) -> FakeResponse:
        if self._table.error is not None:
            raise self._table.error

        if self._action == "select":
            rows = copy.deepcopy(self._matching())
            if self._single:
                if len(rows) != 1:
                    raise APIError(
                        {
                            "code": "PGRST116",
                            "message": "JSON object requested, multiple (or no) rows returned",
                            "details": f"The result contains {len(rows)} rows",
                            "hint": None,
                        }
                    )
                return FakeResponse(rows[0])
            return FakeResponse(rows)

        if self._action == "insert":
            records = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            for record in records:
                row = {
                    **copy.deepcopy(record),
                    "id": record.get("id") or f"talent-{len(self._table.rows) + 1}",
                    "created_at": STORE_TIMESTAMP,
                    "updated_at": STORE_TIMESTAMP,
                }
                self._table.rows.append(row)
                created.append(copy.deepcopy(row))
            return FakeResponse(created)

        if self._action == "update":
            updated = []
            for row in self._matching():
                row.update(copy.deepcopy(self._payload))
                row["updated_at"] = "2025-04-02T08:30:00.000Z"
                updated.append(copy.deepcopy(row))
            return FakeResponse(updated)

        if self._action == "delete":
            doomed = self._matching()
            self._table.rows[:] = [row for row in self._table.rows if row not in doomed]
            return FakeResponse(copy.deepcopy(doomed))

        raise AssertionError(f"unknown action {self._action}")


class FakeTable:
    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self.rows = rows
        self.calls: list[tuple[Any, ...]] = []
        self.error: Exception | None = None

    def select(self, *columns: str) -> FakeQuery:
        self.calls.append(("select", *columns))
        return FakeQuery(self, "select")

    def insert(self, payload: Any) -> FakeQuery:
        self.calls.append(("insert", payload))
        return FakeQuery(self, "insert", payload)

    def update(self, payload: Any) -> FakeQuery:
        self.calls.append(("update", payload))
        return FakeQuery(self, "update", payload)

    def delete(self) -> FakeQuery:
        self.calls.append(("delete",))
        return FakeQuery(self, "delete")


class FakeSupabase:
    """In-memory stand-in for ``supabase.Client``."""

    def __init__(self, rows: Iterable[dict[str, Any]] = ()) -> None:
        self.talents = FakeTable([copy.deepcopy(r) for r in rows])
        self.tables_requested: list[str] = []

    def table(self, name: str) -> FakeTable:
        self.tables_requested.append(name)
        return self.talents

    def fail_with(self, error: Exception) -> None:
        """Make every subsequent request raise *error*."""
        self.talents.error = error


class RecordingFactory:
    """Client factory that counts how often a client is created."""

    def __init__(self, client: Any) -> None:
        self.client = client
        self.calls: list[tuple[str, str]] = []

    def __call__(self, url: str, key: str) -> Any:
        self.calls.append((url, key))
        return self.client


def sample_rows() -> list[dict[str, Any]]:
    """The built-in sample talents as raw store rows."""
    return [talent.to_record() for talent in SAMPLE_TALENTS]


def api_error(code: str = "42P01", message: str = 'relation "talents" does not exist') -> APIError:
    return APIError({"code": code, "message": message, "details": None, "hint": None})


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Keep host credentials and config files out of every test."""
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "DEBUG", "POPMELT_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> PopmeltSettings:
    """Settings with no store configured."""
    return PopmeltSettings.from_cli()


@pytest.fixture
def store_settings() -> PopmeltSettings:
    """Settings with (fake) Supabase credentials."""
    return PopmeltSettings.from_cli(supabase_url=FAKE_URL, supabase_key=FAKE_KEY)


@pytest.fixture
def sample_backend(settings: PopmeltSettings) -> Backend:
    """Backend in sample-data mode."""
    return Backend.from_settings(settings)


@pytest.fixture
def fake_client() -> FakeSupabase:
    """Fake Supabase client seeded with the sample talents."""
    return FakeSupabase(sample_rows())


@pytest.fixture
def store(fake_client: FakeSupabase) -> TalentStore:
    """TalentStore wired to the fake client."""
    return TalentStore(FAKE_URL, FAKE_KEY, client_factory=RecordingFactory(fake_client))


@pytest.fixture
def store_backend(store_settings: PopmeltSettings, fake_client: FakeSupabase) -> Backend:
    """Backend backed by the fake Supabase store."""
    return Backend.from_settings(store_settings, client_factory=RecordingFactory(fake_client))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI and server code under test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    popmelt_logger = logging.getLogger("popmelt")
    popmelt_level = popmelt_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    popmelt_logger.setLevel(popmelt_level)


class RecordingServer:
    """Stand-in for FastMCP that keeps the decorated handlers."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.args = args
        self.kwargs = kwargs
        self.tools: dict[str, Callable[..., Any]] = {}
        self.resources: dict[str, Callable[..., Any]] = {}
        self.resource_options: dict[str, dict[str, Any]] = {}
        self.run_calls: list[dict[str, Any]] = []

    def tool(self, name: str | None = None, **_kwargs: Any) -> Callable[..., Any]:
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.tools[name or fn.__name__] = fn
            return fn

        return decorator

    def resource(self, uri: str, **kwargs: Any) -> Callable[..., Any]:
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.resources[uri] = fn
            self.resource_options[uri] = kwargs
            return fn

        return decorator

    def run(self, **kwargs: Any) -> None:
        self.run_calls.append(kwargs)
