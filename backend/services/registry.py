"""
Instance addressing for the record stores and the catalog index.

Record stores are addressed by a key derived from the owner id, so every call
for one owner reaches the same live instance. The catalog index lives at a
fixed, well-known key.
"""
import hashlib
import logging
import threading
from typing import Dict

from sqlalchemy.orm import sessionmaker

from services.catalog_index import CatalogIndex
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

CATALOG_INDEX_NAME = "global"


def id_from_name(name: str) -> str:
    """Deterministic instance key for a name."""
    return hashlib.sha256(name.encode("utf-8")).hexdigest()


class StoreRegistry:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._index = CatalogIndex(id_from_name(CATALOG_INDEX_NAME), session_factory)
        # Stores live for the whole process; dropping one could leave two
        # instances (and two locks) for the same owner.
        self._stores: Dict[str, RecordStore] = {}
        self._lock = threading.Lock()

    def catalog_index(self) -> CatalogIndex:
        return self._index

    def record_store(self, owner_id: str) -> RecordStore:
        key = id_from_name(owner_id)
        with self._lock:
            store = self._stores.get(key)
            if store is None:
                store = RecordStore(owner_id, key, self.session_factory, self._index)
                self._stores[key] = store
                logger.debug("registry: created record store %s for %s", key[:12], owner_id)
            return store
