from tablemind.tools.schema import Tool

from tablemind.connectors.filter_connector import OPERATORS


FILTER_TOOL = Tool(
    name="filter_numeric",
    description=(
        "Filter the rows of an uploaded file by a numeric comparison on one "
        "column. Reference the file by name; the backend loads the data. "
        "Supports =, !=, >, <, >=, <= and BETWEEN (uses value and value2). "
        "Returns the matching rows and match statistics. "
        'Example: {"filename": "employee_payroll.csv", "field": "salary", '
        '"operator": ">=", "value": 70000}'
    ),
    input_schema={
        "userId": "string?",
        "filename": "string",
        "field": "string",
        "operator": "string",
        "value": "number",
        "value2": "number?",
    },
    output_schema={
        "filteredData": "list[dict]",
        "matchCount": "int",
        "totalCount": "int",
        "filterApplied": "string",
        "percentageMatched": "number",
    },
    field_descriptions={
        "filename": 'Name of the uploaded file (e.g. "employee_payroll.csv")',
        "field": "Numeric column to filter on",
        "operator": "Comparison operator",
        "value": "Comparison value (lower bound for BETWEEN)",
        "value2": "Upper bound, only for BETWEEN",
    },
    enums={"operator": OPERATORS},
    injected_fields=("userId",),
    connector_name="filter",
    version="1.0.0",
    tags=("builtin", "analytics", "filter"),
)
