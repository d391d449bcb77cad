from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..data.tabular import TabularData


class StorageBackend(ABC):
    """
    Boundary between the toolkit and wherever parsed uploads live.

    A backend maps a (user, filename) pair to parsed TabularData. Upload,
    byte-level parsing and cache lifetime are backend concerns; the
    toolkit only ever reads.

    Backends must:
        • Raise DataNotFoundError when the pair has no data
          (never uploaded, expired, or owned by another user)
        • Return data that is safe to share between concurrent calls
        • Never mutate data after returning it
    """

    @abstractmethod
    def resolve(self, user_id: str, filename: str) -> "TabularData":
        """
        Return the parsed table for a user's file.

        Raises
        ------
        DataNotFoundError
            If no matching parsed data exists.
        """
        raise NotImplementedError

    def health(self) -> bool:
        return True
