import pytest

from tablemind.app import TableMindApp
from tablemind.data.loader import TabularDataLoader
from tablemind.data.tabular import TabularData
from tablemind.storage.memory import InMemoryStorage


USER = "user-123"

PAYROLL = [
    {"name": "Alice", "department": "Engineering", "salary": 50000, "age": "34"},
    {"name": "Bob", "department": "Sales", "salary": "60000", "age": "x"},
    {"name": "Carol", "department": "Engineering", "salary": 90000, "age": 41},
    {"name": "Dan", "department": "Support", "salary": "", "age": 29},
]

MIXED = [
    {"reading": "5", "label": "a"},
    {"reading": "x", "label": "b"},
    {"reading": 10, "label": "c"},
    {"reading": "", "label": "d"},
]


@pytest.fixture
def storage():
    store = InMemoryStorage()
    store.put(USER, "payroll.csv", PAYROLL)
    store.put(USER, "mixed.csv", MIXED)
    return store


@pytest.fixture
def loader(storage):
    return TabularDataLoader(storage)


@pytest.fixture
def payroll():
    return TabularData.from_records(PAYROLL, source="payroll.csv")


@pytest.fixture
def executor(storage):
    return TableMindApp.create(storage=storage)
