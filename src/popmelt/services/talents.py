"""TalentService — listing, lookup, and criteria queries over talents.

Three read-only surfaces:
- list_talents: ``{id, name, type}`` summaries for every talent
- get_talent: one full record, or a NOT_FOUND failure
- query_talents: records matching a field → value criteria mapping

Reads go to the store when the backend has one. A failed store call is
captured as a :class:`StoreAttempt` and the service's
:class:`FallbackPolicy` decides what happens next: ``dataset`` logs the
failure and answers from the sample talents (with a warning), ``fail``
returns a STORE_ERROR result. Either way ``meta.source`` says which source
answered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from popmelt.domain.criteria import matches
from popmelt.domain.types import FallbackPolicy, Source
from popmelt.infrastructure.errors import StoreError
from popmelt.services.base import BaseService
from popmelt.services.result import ServiceError, ServiceResult, StoreAttempt

if TYPE_CHECKING:
    from popmelt.domain.talent import Talent
    from popmelt.infrastructure.backend import Backend
    from popmelt.infrastructure.store import TalentStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class _Read(Generic[T]):
    value: T
    source: Source
    warnings: list[str]


class TalentService(BaseService):
    """Reads talents from the store, or from the sample dataset."""

    def __init__(
        self,
        backend: Backend,
        *,
        fallback: FallbackPolicy | str | None = None,
    ) -> None:
        super().__init__(backend)
        policy = fallback if fallback is not None else backend.settings.store.fallback
        self._fallback = FallbackPolicy(policy)

    @property
    def fallback(self) -> FallbackPolicy:
        return self._fallback

    # ------------------------------------------------------------------
    # list_talents
    # ------------------------------------------------------------------

    def list_talents(self) -> ServiceResult:
        """Summaries of every talent in the active source."""
        op = "list_talents"
        read = self._read(op, lambda store: store.fetch_all(), self._all_samples)
        if isinstance(read, ServiceResult):
            return read

        items = [talent.summary_record() for talent in read.value]
        return _success(op, {"count": len(items), "items": items}, read)

    # ------------------------------------------------------------------
    # get_talent
    # ------------------------------------------------------------------

    def get_talent(self, talent_id: str) -> ServiceResult:
        """The full record for *talent_id*.

        A store miss is not a failure of the store, so it does not trigger
        the fallback: the result is NOT_FOUND.
        """
        _, result = self.find_talent(talent_id)
        return result

    def find_talent(self, talent_id: str) -> tuple[Talent | None, ServiceResult]:
        """Like :meth:`get_talent` but also hands back the model itself."""
        op = "get_talent"
        logger.debug("Fetching talent: %s", talent_id)
        read = self._read(
            op,
            lambda store: store.fetch_by_id(talent_id),
            lambda: self._backend.find_sample(talent_id),
        )
        if isinstance(read, ServiceResult):
            return None, read
        if read.value is None:
            failure = ServiceResult(
                ok=False,
                op=op,
                error=_not_found(talent_id),
                warnings=read.warnings,
                meta={"source": read.source.value},
            )
            return None, failure
        return read.value, _success(op, read.value.to_record(), read)

    # ------------------------------------------------------------------
    # query_talents
    # ------------------------------------------------------------------

    def query_talents(self, criteria: Mapping[str, Any] | None = None) -> ServiceResult:
        """Talents matching every criterion; empty criteria match all."""
        op = "query_talents"
        wanted = dict(criteria or {})
        logger.debug("Querying talents with criteria: %s", wanted)

        read = self._read(
            op,
            lambda store: store.query(wanted),
            lambda: [t for t in self._backend.samples if matches(t.to_record(), wanted)],
        )
        if isinstance(read, ServiceResult):
            return read

        items = [talent.to_record() for talent in read.value]
        return _success(op, {"criteria": wanted, "count": len(items), "items": items}, read)

    # ------------------------------------------------------------------
    # Source selection
    # ------------------------------------------------------------------

    def _all_samples(self) -> list[Talent]:
        return list(self._backend.samples)

    def _attempt(self, call: Callable[[TalentStore], T]) -> StoreAttempt[T]:
        store = self._backend.store
        assert store is not None
        try:
            return StoreAttempt.success(call(store))
        except StoreError as exc:
            return StoreAttempt.failed(exc)

    def _read(
        self,
        op: str,
        from_store: Callable[[TalentStore], T],
        from_samples: Callable[[], T],
    ) -> _Read[T] | ServiceResult:
        """Run *from_store*, applying the fallback policy if it fails."""
        if not self._backend.using_store:
            return _Read(from_samples(), Source.FALLBACK, [])

        attempt = self._attempt(from_store)
        if attempt.ok:
            return _Read(attempt.value, Source.STORE, [])  # type: ignore[arg-type]

        error = attempt.error
        assert error is not None
        if self._fallback is FallbackPolicy.FAIL:
            logger.error("Store call failed during %s: %s", op, error)
            return ServiceResult.failure(
                op,
                "STORE_ERROR",
                error.message,
                {"operation": error.operation, "code": error.code},
            )

        logger.error("Store call failed during %s, using sample data: %s", op, error)
        warning = f"Store unavailable ({error.message}); served sample data"
        return _Read(from_samples(), Source.FALLBACK, [warning])


def _not_found(talent_id: str) -> ServiceError:
    return ServiceError(
        code="NOT_FOUND",
        message=f'Talent with ID "{talent_id}" not found',
        detail={"talent_id": talent_id},
    )


def _success(op: str, data: dict[str, Any], read: _Read[Any]) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op=op,
        data=data,
        warnings=read.warnings,
        meta={"source": read.source.value},
    )
