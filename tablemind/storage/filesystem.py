from __future__ import annotations

from pathlib import Path
from zipfile import BadZipFile
import logging

import pandas as pd

from .base import StorageBackend
from ..data.tabular import TabularData
from ..errors import DataNotFoundError, InvalidInputError

logger = logging.getLogger(__name__)


class FilesystemStorage(StorageBackend):
    """
    Reads uploads from ``<root>/<user_id>/<filename>``.

    CSV files go through ``pandas.read_csv``; XLSX/XLS through
    ``pandas.read_excel`` (first sheet only).
    """

    READERS = {
        "csv": "_read_csv",
        "xlsx": "_read_excel",
        "xls": "_read_excel",
    }

    def __init__(self, root) -> None:
        self._root = Path(root)

    def resolve(self, user_id: str, filename: str) -> TabularData:
        path = self._path_for(user_id, filename)

        extension = path.suffix.lower().lstrip(".")
        reader = self.READERS.get(extension)

        if reader is None:
            raise InvalidInputError(
                f"Unsupported file type: '{extension or filename}'. "
                "Data tools only support CSV and XLSX files."
            )

        if not path.is_file():
            raise DataNotFoundError(
                f"No data found for file '{filename}'. "
                "It may have expired or was never uploaded."
            )

        logger.info("[STORAGE] Parsing %s", path)

        try:
            frame = getattr(self, reader)(path)
        except pd.errors.EmptyDataError:
            raise DataNotFoundError(f"No data found in file: {filename}") from None
        except (ValueError, BadZipFile) as e:
            raise InvalidInputError(
                f"File loading failed for '{filename}': {e}"
            ) from e

        if frame.empty:
            raise DataNotFoundError(f"No data found in file: {filename}")

        return TabularData.from_dataframe(frame, source=filename)

    def health(self) -> bool:
        return self._root.is_dir()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _path_for(self, user_id: str, filename: str) -> Path:
        for part in (user_id, filename):
            if (
                not part
                or part in {".", ".."}
                or "/" in part
                or "\\" in part
            ):
                raise InvalidInputError(f"Invalid path component: '{part}'")

        return self._root / user_id / filename

    @staticmethod
    def _read_csv(path: Path) -> pd.DataFrame:
        return pd.read_csv(path)

    @staticmethod
    def _read_excel(path: Path) -> pd.DataFrame:
        return pd.read_excel(path, sheet_name=0)
