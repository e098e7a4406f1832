"""Backend — the single dependency injected into every service.

Owns the optional :class:`TalentStore` and the sample dataset. When the
store credentials are absent, or the client cannot be created, the backend
runs in sample-data mode and ``store`` is None.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from popmelt.domain.samples import SAMPLE_TALENTS
from popmelt.infrastructure.errors import ConfigurationError
from popmelt.infrastructure.store import ClientFactory, TalentStore

if TYPE_CHECKING:
    from popmelt.config.settings import PopmeltSettings
    from popmelt.domain.talent import Talent

logger = logging.getLogger(__name__)


class Backend:
    """Data sources available to the services.

    Attributes:
        settings: The resolved application settings.
        samples: Immutable fallback talents.
    """

    def __init__(
        self,
        settings: PopmeltSettings,
        *,
        store: TalentStore | None = None,
        samples: Iterable[Talent] | None = None,
    ) -> None:
        self.settings = settings
        self._store = store
        self.samples: tuple[Talent, ...] = (
            tuple(samples) if samples is not None else SAMPLE_TALENTS
        )

    @classmethod
    def from_settings(
        cls,
        settings: PopmeltSettings,
        *,
        client_factory: ClientFactory | None = None,
    ) -> Backend:
        """Build a backend, initializing the store when credentials are set.

        A ConfigurationError while creating the client is logged and the
        backend falls back to sample data.
        """
        if not settings.store_configured:
            logger.info("Supabase environment variables not set, using sample data")
            return cls(settings)

        store = TalentStore(
            settings.supabase_url,
            settings.supabase_key,
            table=settings.store.table,
            client_factory=client_factory,
        )
        try:
            store.initialize()
        except ConfigurationError as exc:
            logger.error("Failed to initialize Supabase: %s", exc)
            logger.info("Falling back to sample data")
            return cls(settings)

        logger.info("Supabase client initialized successfully (table %s)", store.table)
        return cls(settings, store=store)

    @property
    def store(self) -> TalentStore | None:
        return self._store

    @property
    def using_store(self) -> bool:
        return self._store is not None

    def find_sample(self, talent_id: str) -> Talent | None:
        """Look up a fallback talent by ID."""
        for talent in self.samples:
            if talent.id == talent_id:
                return talent
        return None
