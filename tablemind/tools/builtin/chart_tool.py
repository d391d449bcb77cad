from tablemind.tools.schema import Tool


CHART_TOOL = Tool(
    name="create_plot",
    description=(
        "Create a bar chart or xy plot for the user to see. Reference an "
        "uploaded file by name and give the column names; do NOT extract or "
        "pass data arrays for files, the backend loads them. For bar charts "
        "xField holds category names and yField the values. For xy plots "
        "both columns are numeric. "
        'Example: {"filename": "employee_payroll.csv", "type": "bar", '
        '"xField": "name", "yField": "salary", "title": "Employee Salaries"}'
    ),
    input_schema={
        "userId": "string?",
        "filename": "string?",
        "type": "string",
        "title": "string",
        "xField": "string?",
        "yField": "string?",
        "xLabel": "string?",
        "yLabel": "string?",
        "data": "list[dict]?",
    },
    output_schema={
        "type": "string",
        "title": "string",
        "data": "list[dict]",
        "xLabel": "string",
        "yLabel": "string",
        "dataPoints": "int",
    },
    field_descriptions={
        "filename": 'Name of the uploaded file (e.g. "sales_data.csv")',
        "type": '"bar" for categorical data, "xy" for numeric relationships',
        "title": "Title for the chart",
        "xField": "Column for the x-axis (bar: category names, xy: x values)",
        "yField": "Column for the y-axis values",
        "xLabel": "X-axis label (defaults to xField)",
        "yLabel": "Y-axis label (defaults to yField)",
        "data": (
            "Inline points when no file is referenced: "
            '[{"name", "value"}] for bar, [{"x", "y"}] for xy'
        ),
    },
    enums={"type": ("bar", "xy")},
    injected_fields=("userId",),
    connector_name="chart",
    version="1.0.0",
    tags=("builtin", "visualization"),
)
