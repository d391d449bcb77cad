import json
import logging

from tablemind import TableMindApp, configure_logging
from tablemind.models import ToolCall
from tablemind.storage import InMemoryStorage

configure_logging("INFO")

logger = logging.getLogger("tablemind.example")

# --------------------------------
# Consumer infrastructure
# --------------------------------

storage = InMemoryStorage()

storage.put(
    "user-1",
    "employee_payroll.csv",
    [
        {"name": "Alice", "salary": 50000, "age": 34},
        {"name": "Bob", "salary": "60000", "age": 41},
        {"name": "Carol", "salary": 90000, "age": 29},
        {"name": "Dan", "salary": "n/a", "age": 52},
    ],
)

executor = TableMindApp.create(storage=storage)

# --------------------------------
# What the chat loop hands to the LLM
# --------------------------------

print(json.dumps(executor.registry.get_function_specs(), indent=2))

# --------------------------------
# Calls the LLM might make
# --------------------------------

calls = [
    ToolCall(
        tool_name="compute_avg_count_sum_min_max_median",
        arguments={"filename": "employee_payroll.csv", "field": "salary"},
        user_id="user-1",
    ),
    ToolCall(
        tool_name="create_plot",
        arguments={
            "filename": "employee_payroll.csv",
            "type": "bar",
            "title": "Employee Salaries",
            "xField": "name",
            "yField": "salary",
        },
        user_id="user-1",
    ),
    ToolCall(
        tool_name="filter_numeric",
        arguments={
            "filename": "employee_payroll.csv",
            "field": "age",
            "operator": "between",
            "value": 30,
            "value2": 45,
        },
        user_id="user-1",
    ),
    ToolCall(tool_name="create_pie", arguments={}, user_id="user-1"),
]

for call in calls:
    result = executor.execute_call(call)
    logger.info("%s -> %s", call.tool_name, result.status)
    print(json.dumps(result.to_dict(), indent=2))
