"""TalentStore — Supabase adapter for the ``talents`` table.

One instance is constructed per process and injected where needed. It owns a
single Supabase client handle, created on :meth:`TalentStore.initialize` or
lazily on first use, and reused for the lifetime of the instance. The client
is stateless HTTP, so there is nothing to tear down.

Every PostgREST or transport failure is translated into :class:`StoreError`.
A ``.single()`` lookup that matches no rows (``PGRST116``) is reported as
``None`` instead.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import create_client

from popmelt.domain.criteria import KEYWORDS_FIELD, TYPE_FIELD, keyword_term, matches
from popmelt.domain.talent import Talent, insertable
from popmelt.infrastructure.errors import ConfigurationError, StoreError

if TYPE_CHECKING:
    from supabase import Client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "talents"
NO_ROWS_CODE = "PGRST116"
KEYWORDS_COLUMN = "aesthetic->keywords"

# LIKE wildcards in a criterion are literal. PostgREST rewrites `*` to `%`
# before Postgres sees the pattern, so `*` is sent as the one-character
# wildcard `_` and the rows are re-checked in process.
_LIKE_ESCAPES = str.maketrans({"\\": "\\\\", "%": "\\%", "_": "\\_", "*": "_"})

ClientFactory = Callable[[str, str], Any]


def ilike_pattern(value: Any) -> str:
    """Substring pattern for *value* with its LIKE wildcards escaped."""
    return f"%{str(value).translate(_LIKE_ESCAPES)}%"


def validate_credentials(url: str, key: str) -> None:
    """Raise ConfigurationError unless *url* and *key* look usable."""
    if not url or not key:
        msg = "Supabase URL and key must be provided as environment variables"
        raise ConfigurationError(msg)
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        msg = f"Malformed Supabase URL: {url!r}"
        raise ConfigurationError(msg)
    if not key.strip():
        msg = "Supabase key must not be blank"
        raise ConfigurationError(msg)


@contextmanager
def _translate_errors(operation: str, message: str) -> Iterator[None]:
    """Re-raise PostgREST and transport failures as StoreError."""
    try:
        yield
    except APIError as exc:
        raise StoreError(
            f"{message}: {exc.message}", operation=operation, code=exc.code
        ) from exc
    except httpx.HTTPError as exc:
        raise StoreError(f"{message}: {exc}", operation=operation) from exc


class TalentStore:
    """CRUD and filtered reads against a Supabase table of talents."""

    def __init__(
        self,
        url: str,
        key: str,
        *,
        table: str = DEFAULT_TABLE,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._url = url
        self._key = key
        self._table = table
        self._client_factory = client_factory or create_client
        self._client: Client | None = None

    @property
    def table(self) -> str:
        return self._table

    @property
    def initialized(self) -> bool:
        return self._client is not None

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> Client:
        """Create and memoize the client handle.

        Raises ConfigurationError for empty or malformed credentials, or if
        the Supabase library rejects them.
        """
        validate_credentials(self._url, self._key)
        try:
            client = self._client_factory(self._url, self._key)
        except Exception as exc:
            raise ConfigurationError(f"Could not create Supabase client: {exc}") from exc
        self._client = client
        logger.debug("Supabase client created for table %s", self._table)
        return client

    @property
    def client(self) -> Client:
        """The memoized client, created on first access."""
        if self._client is None:
            return self.initialize()
        return self._client

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_all(self) -> list[Talent]:
        """Every talent in the table."""
        with _translate_errors("fetch_all", "Error fetching talents"):
            response = self.client.table(self._table).select("*").execute()
        return self._to_talents(response.data, "fetch_all")

    def fetch_by_id(self, talent_id: str) -> Talent | None:
        """The talent with *talent_id*, or None if the store has no such row."""
        try:
            response = (
                self.client.table(self._table).select("*").eq("id", talent_id).single().execute()
            )
        except APIError as exc:
            if exc.code == NO_ROWS_CODE:
                return None
            raise StoreError(
                f"Error fetching talent with ID {talent_id}: {exc.message}",
                operation="fetch_by_id",
                code=exc.code,
            ) from exc
        except httpx.HTTPError as exc:
            raise StoreError(
                f"Error fetching talent with ID {talent_id}: {exc}",
                operation="fetch_by_id",
            ) from exc
        return self._to_talent(response.data, "fetch_by_id")

    def query(self, criteria: Mapping[str, Any] | None = None) -> list[Talent]:
        """Talents matching every criterion (AND-combined).

        ``keywords`` becomes a JSON containment test on ``aesthetic->keywords``,
        ``type`` an equality filter, anything else a case-insensitive
        substring match with LIKE wildcards in the value taken literally.
        """
        wanted = dict(criteria or {})
        recheck = False
        request = self.client.table(self._table).select("*")
        for field, value in wanted.items():
            if field == KEYWORDS_FIELD:
                request = request.contains(KEYWORDS_COLUMN, json.dumps([keyword_term(value)]))
            elif field == TYPE_FIELD:
                request = request.eq(field, value)
            else:
                request = request.ilike(field, ilike_pattern(value))
                recheck = recheck or "*" in str(value)

        with _translate_errors("query", "Error querying talents"):
            response = request.execute()
        talents = self._to_talents(response.data, "query")
        if recheck:
            talents = [t for t in talents if matches(t.to_record(), wanted)]
        return talents

    # ------------------------------------------------------------------
    # Writes — errors propagate to the caller
    # ------------------------------------------------------------------

    def create(self, record: Talent | Mapping[str, Any]) -> Talent:
        """Insert a talent; the store assigns ``id`` and timestamps."""
        payload = insertable(_as_record(record))
        with _translate_errors("create", "Error creating talent"):
            response = self.client.table(self._table).insert(payload).execute()
        rows = response.data or []
        if not rows:
            raise StoreError("Error creating talent: no row returned", operation="create")
        return self._to_talent(rows[0], "create")

    def update(self, talent_id: str, changes: Mapping[str, Any]) -> Talent:
        """Apply a partial update and return the updated talent."""
        message = f"Error updating talent with ID {talent_id}"
        with _translate_errors("update", message):
            response = (
                self.client.table(self._table).update(dict(changes)).eq("id", talent_id).execute()
            )
        rows = response.data or []
        if not rows:
            raise StoreError(f"{message}: not found", operation="update", code=NO_ROWS_CODE)
        return self._to_talent(rows[0], "update")

    def delete(self, talent_id: str) -> None:
        """Delete a talent. Succeeds whether or not the row existed."""
        with _translate_errors("delete", f"Error deleting talent with ID {talent_id}"):
            self.client.table(self._table).delete().eq("id", talent_id).execute()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_talent(row: Any, operation: str) -> Talent:
        try:
            return Talent.from_record(row)
        except (ValidationError, TypeError, AttributeError) as exc:
            raise StoreError(
                f"Unexpected talent record shape: {exc}", operation=operation
            ) from exc

    @classmethod
    def _to_talents(cls, rows: Any, operation: str) -> list[Talent]:
        return [cls._to_talent(row, operation) for row in rows or []]


def _as_record(record: Talent | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(record, Talent):
        return record.to_record()
    return dict(record)
