"""
Failure taxonomy shared by every layer of the toolkit.

Every failure raised inside a tool call derives from ToolError and carries
a ``kind`` so the executor can report one consistent failure shape no
matter which component detected the problem.
"""


class ToolError(Exception):
    """Base class for failures scoped to a single tool call."""

    kind = "internal"


class NotFoundError(ToolError):
    """A named thing (tool, file, column) does not exist."""

    kind = "not_found"


class ToolNotFoundError(NotFoundError):
    """Raised when a tool name is not registered."""
    pass


class DataNotFoundError(NotFoundError):
    """Raised when no parsed data exists for a (user, filename) pair."""
    pass


class ColumnNotFoundError(NotFoundError):
    """Raised when a column is missing from a table."""

    def __init__(self, column: str, available, suggestion: str = None) -> None:
        self.column = column
        self.available = list(available)
        self.suggestion = suggestion

        message = f"Field '{column}' not found."
        if suggestion:
            message += f" Did you mean '{suggestion}'?"
        message += f" Available fields: {', '.join(map(str, self.available))}"

        super().__init__(message)


class InvalidInputError(ToolError):
    """Malformed or insufficient arguments, or no usable data."""

    kind = "invalid_input"


class ComputationError(ToolError):
    """A numeric edge case that must not be masked."""

    kind = "computation"
