# garage/storage/factory.py
import logging
import os
from typing import Optional

from garage import config
from garage.storage.base import CarStore, seed_example
from garage.storage.memory import MemoryCarStore
from garage.storage.sql import SqlCarStore

logger = logging.getLogger(__name__)

BACKENDS = ("memory", "sqlite")


def _ensure_sqlite_dir(url: str) -> None:
    prefix = "sqlite:///"
    if not url.startswith(prefix) or url.endswith(":memory:"):
        return
    folder = os.path.dirname(url[len(prefix):])
    if folder:
        os.makedirs(folder, exist_ok=True)


def build_store(
    backend: Optional[str] = None,
    url: Optional[str] = None,
    seed: Optional[bool] = None,
) -> CarStore:
    """
    Builds the store named by CAR_STORE (or `backend`) and optionally seeds it.
    Arguments left as None fall back to garage.config.
    """
    backend = (backend or config.CAR_STORE).lower()
    seed = config.SEED_EXAMPLE if seed is None else seed

    if backend == "memory":
        store: CarStore = MemoryCarStore()
    elif backend == "sqlite":
        url = url or config.DATABASE_URL
        _ensure_sqlite_dir(url)
        store = SqlCarStore(url, echo=config.SQL_ECHO)
    else:
        raise ValueError(f"Unknown CAR_STORE '{backend}', expected one of {BACKENDS}")

    logger.info("Car store ready: %s", backend)
    if seed:
        seed_example(store)
    return store
