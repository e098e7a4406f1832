"""BaseService — foundation for the popmelt services.

Every service receives a :class:`Backend` at construction time and reaches
the store and the sample dataset only through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from popmelt.infrastructure.backend import Backend


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TalentService(BaseService):
            def list_talents(self) -> ServiceResult:
                store = self._backend.store
                ...
    """

    def __init__(self, backend: Backend) -> None:
        self._backend = backend
