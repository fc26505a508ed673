import logging

from billed.models.session import SessionContext
from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)


def get_store(session: SessionContext) -> Store:
    backend = settings.store_backend

    if backend == "memory":
        from billed.storage.factory import get_storage
        from billed.store.memory import InMemoryStore

        logger.info("Using store backend: memory owner=%s", session.email)
        return InMemoryStore(get_storage(), owner_email=session.email)

    raise ValueError(f"Unsupported store backend: {backend}")
