from tablemind.tools.schema import Tool


STATISTICS_TOOL = Tool(
    name="compute_avg_count_sum_min_max_median",
    description=(
        "Calculate the average (mean), count, sum, min, max, and median of "
        "numeric data. Either reference an uploaded file by name and give "
        "the column in 'field' (preferred; the backend loads the data), or "
        "pass a small array of numbers in 'numbers'. "
        'Example: {"filename": "employee_payroll.csv", "field": "salary"}'
    ),
    input_schema={
        "userId": "string?",           # injected by the executor
        "filename": "string?",         # file mode
        "field": "string?",            # file mode
        "numbers": "list[number]?",    # direct mode
    },
    output_schema={
        "average": "number",
        "count": "int",
        "sum": "number",
        "min": "number",
        "max": "number",
        "median": "number",
    },
    field_descriptions={
        "filename": 'Name of the uploaded file (e.g. "sales_data.csv")',
        "field": "Column whose values should be summarized",
        "numbers": "Inline numbers, used only when no file is referenced",
    },
    injected_fields=("userId",),
    connector_name="statistics",
    version="1.1.0",
    tags=("builtin", "analytics", "statistics"),
)
