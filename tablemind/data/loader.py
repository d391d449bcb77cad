from __future__ import annotations

import logging

from ..errors import InvalidInputError
from ..storage.base import StorageBackend
from .tabular import TabularData

logger = logging.getLogger(__name__)


class TabularDataLoader:
    """
    Resolves a (user, filename) pair to previously parsed tabular data.

    The loader owns argument checks only. Lookup, parsing and any caching
    are the storage backend's business, so every call re-fetches.
    """

    def __init__(self, storage: StorageBackend) -> None:
        if not isinstance(storage, StorageBackend):
            raise TypeError("storage must implement StorageBackend.")
        self._storage = storage

    def load(self, user_id: str, filename: str) -> TabularData:

        if not user_id or not isinstance(user_id, str):
            raise InvalidInputError("A valid userId is required to load file data.")

        if not filename or not isinstance(filename, str):
            raise InvalidInputError("A valid filename is required to load file data.")

        logger.info("[LOADER] Loading '%s' for user %s", filename, user_id)

        data = self._storage.resolve(user_id, filename)

        logger.info(
            "[LOADER] Loaded '%s' | rows=%d | columns=%d",
            filename,
            data.row_count,
            len(data.columns),
        )

        return data

    @property
    def storage(self) -> StorageBackend:
        return self._storage
