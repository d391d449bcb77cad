"""
Tests for storage backends and the tabular data loader.
"""
import pandas as pd
import pytest

from tablemind.data.loader import TabularDataLoader
from tablemind.errors import DataNotFoundError, InvalidInputError
from tablemind.storage.filesystem import FilesystemStorage
from tablemind.storage.memory import InMemoryStorage

from conftest import USER


class TestLoader:
    """Loader argument checks and delegation."""

    def test_loads_stored_table(self, loader):
        data = loader.load(USER, "payroll.csv")

        assert data.row_count == 4
        assert "salary" in data.columns

    def test_unknown_file_is_not_found(self, loader):
        with pytest.raises(DataNotFoundError):
            loader.load(USER, "nope.csv")

    def test_other_users_cannot_see_file(self, loader):
        with pytest.raises(DataNotFoundError):
            loader.load("someone-else", "payroll.csv")

    def test_requires_user_and_filename(self, loader):
        with pytest.raises(InvalidInputError):
            loader.load("", "payroll.csv")

        with pytest.raises(InvalidInputError):
            loader.load(USER, None)

    def test_rejects_non_backend(self):
        with pytest.raises(TypeError):
            TabularDataLoader(object())


class TestInMemoryStorage:

    def test_accepts_dataframes(self):
        store = InMemoryStorage()
        store.put(USER, "f.csv", pd.DataFrame({"x": [1, 2]}))

        assert store.resolve(USER, "f.csv").columns == ("x",)

    def test_remove(self, storage):
        assert storage.remove(USER, "payroll.csv") is True
        assert storage.remove(USER, "payroll.csv") is False

        with pytest.raises(DataNotFoundError):
            storage.resolve(USER, "payroll.csv")


class TestFilesystemStorage:
    """Reads uploads from <root>/<user>/<filename> with pandas."""

    def setup_method(self):
        self.csv = "region,revenue\nNorth,100\nSouth,\n"

    def _write(self, root, name, text):
        folder = root / USER
        folder.mkdir(parents=True, exist_ok=True)
        (folder / name).write_text(text)

    def test_reads_csv(self, tmp_path):
        self._write(tmp_path, "sales.csv", self.csv)

        data = FilesystemStorage(tmp_path).resolve(USER, "sales.csv")

        assert data.columns == ("region", "revenue")
        assert data.rows[0]["region"] == "North"
        assert data.rows[0]["revenue"] == 100
        assert data.rows[1]["revenue"] is None

    def test_reads_xlsx(self, tmp_path):
        (tmp_path / USER).mkdir()
        frame = pd.DataFrame({"name": ["a", "b"], "score": [1, 2]})
        frame.to_excel(tmp_path / USER / "scores.xlsx", index=False)

        data = FilesystemStorage(tmp_path).resolve(USER, "scores.xlsx")

        assert data.columns == ("name", "score")
        assert data.row_count == 2

    def test_missing_file_is_not_found(self, tmp_path):
        with pytest.raises(DataNotFoundError):
            FilesystemStorage(tmp_path).resolve(USER, "missing.csv")

    def test_empty_csv_is_not_found(self, tmp_path):
        self._write(tmp_path, "empty.csv", "")

        with pytest.raises(DataNotFoundError):
            FilesystemStorage(tmp_path).resolve(USER, "empty.csv")

    def test_corrupt_xlsx_is_invalid(self, tmp_path):
        self._write(tmp_path, "broken.xlsx", "this is not a workbook")

        with pytest.raises(InvalidInputError) as exc:
            FilesystemStorage(tmp_path).resolve(USER, "broken.xlsx")

        assert "broken.xlsx" in str(exc.value)

    def test_unsupported_extension(self, tmp_path):
        self._write(tmp_path, "notes.txt", "hello")

        with pytest.raises(InvalidInputError):
            FilesystemStorage(tmp_path).resolve(USER, "notes.txt")

    def test_rejects_path_traversal(self, tmp_path):
        storage = FilesystemStorage(tmp_path)

        with pytest.raises(InvalidInputError):
            storage.resolve("..", "sales.csv")

        with pytest.raises(InvalidInputError):
            storage.resolve(USER, "../other/sales.csv")

    def test_health_reflects_root(self, tmp_path):
        assert FilesystemStorage(tmp_path).health() is True
        assert FilesystemStorage(tmp_path / "absent").health() is False
