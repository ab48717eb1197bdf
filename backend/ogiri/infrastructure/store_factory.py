"""Store Factory — builds the configured DataStore once at startup."""

import logging

from ogiri.config import Settings
from ogiri.core.domain_types import StoreBackend
from ogiri.core.repository_protocols import DataStore
from ogiri.infrastructure.json_store import JSONStore
from ogiri.infrastructure.memory_store import InMemoryStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> DataStore:
    if settings.store_backend == StoreBackend.JSON:
        store: DataStore = JSONStore(settings.data_file)
    else:
        store = InMemoryStore()
    logger.info(
        f"Using {settings.store_backend.value} store",
        extra={"backend": settings.store_backend.value},
    )
    return store
