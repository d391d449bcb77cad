"""
Tests for the numeric filter connector.
"""
import pytest

from tablemind.connectors.filter_connector import FilterConnector
from tablemind.data.loader import TabularDataLoader
from tablemind.errors import InvalidInputError
from tablemind.storage.memory import InMemoryStorage

from conftest import PAYROLL, USER

TOOL = "filter_numeric"


@pytest.fixture
def connector(loader):
    return FilterConnector(loader)


def args(**kwargs):
    base = {"userId": USER, "filename": "payroll.csv", "field": "salary"}
    base.update(kwargs)
    return base


class TestComparisons:

    def test_greater_or_equal(self, connector):
        result = connector.execute(TOOL, args(operator=">=", value=60000))

        assert [r["name"] for r in result["filteredData"]] == ["Bob", "Carol"]
        assert result["matchCount"] == 2
        assert result["totalCount"] == 4
        assert result["percentageMatched"] == 50.0
        assert result["filterApplied"] == "salary >= 60000"

    def test_equality(self, connector):
        result = connector.execute(TOOL, args(operator="=", value=50000))

        assert result["filteredData"] == [PAYROLL[0]]

    def test_non_numeric_rows_never_match(self, connector):
        result = connector.execute(TOOL, args(operator="!=", value=1))

        assert result["matchCount"] == 3

    def test_between_orders_bounds(self, connector):
        result = connector.execute(
            TOOL, args(operator="BETWEEN", value=90000, value2=55000)
        )

        assert [r["name"] for r in result["filteredData"]] == ["Bob", "Carol"]
        assert result["filterApplied"] == "salary BETWEEN 55000 AND 90000"

    def test_percentage_rounds_to_one_decimal(self):
        store = InMemoryStorage()
        store.put(USER, "s.csv", [{"v": 50000}, {"v": "x"}, {"v": 70000}, {"v": 90000}])
        connector = FilterConnector(TabularDataLoader(store))

        result = connector.execute(
            TOOL,
            {"userId": USER, "filename": "s.csv", "field": "v", "operator": ">=", "value": 70000},
        )

        assert result["matchCount"] == 2
        assert result["percentageMatched"] == 50.0


class TestValidation:

    def test_unsupported_operator(self, connector):
        with pytest.raises(InvalidInputError) as exc:
            connector.execute(TOOL, args(operator="~", value=1))

        assert "Unsupported operator" in str(exc.value)

    def test_between_requires_value2(self, connector):
        with pytest.raises(InvalidInputError):
            connector.execute(TOOL, args(operator="between", value=1))

    def test_value_beyond_float_range_is_invalid(self, connector):
        with pytest.raises(InvalidInputError):
            connector.execute(TOOL, args(operator=">", value=10**400))

    def test_value_must_be_numeric(self, connector):
        with pytest.raises(InvalidInputError):
            connector.execute(TOOL, args(operator=">", value="10"))

    def test_missing_arguments(self, connector):
        with pytest.raises(InvalidInputError) as exc:
            connector.execute(TOOL, {"userId": USER, "operator": ">"})

        assert "filename" in str(exc.value)
