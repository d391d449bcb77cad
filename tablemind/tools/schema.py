from dataclasses import dataclass, field
from typing import Dict, Any, List, Tuple


# Input hint -> JSON schema fragment used for LLM function calling
_HINT_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "string": {"type": "string"},
    "number": {"type": "number"},
    "float": {"type": "number"},
    "int": {"type": "integer"},
    "bool": {"type": "boolean"},
    "dict": {"type": "object"},
    "list": {"type": "array"},
    "list[number]": {"type": "array", "items": {"type": "number"}},
    "list[string]": {"type": "array", "items": {"type": "string"}},
    "list[dict]": {"type": "array", "items": {"type": "object"}},
    "any": {},
}


@dataclass(frozen=True)
class Tool:
    """
    Declarative contract describing one analysis capability.

    A Tool defines WHAT the agent may ask for, while the computation is
    delegated to the Connector named by ``connector_name``:

        LLM call → ToolExecutor → Connector → ToolResult

    Input schema values are type hints (``"string"``, ``"list[number]"``,
    ...). A trailing ``?`` marks a field optional. The hints double as the
    source of the JSON-schema ``parameter_schema`` handed to the LLM's
    function-calling layer.

    Fields listed in ``injected_fields`` are supplied by the executor
    (for example the caller's ``userId``) and are hidden from the LLM.
    """

    # ------------------------------------------------------------------
    # Core Identity
    # ------------------------------------------------------------------

    name: str
    description: str
    connector_name: str

    # ------------------------------------------------------------------
    # Schemas (Contract Layer)
    # ------------------------------------------------------------------

    input_schema: Dict[str, Any]
    output_schema: Dict[str, Any]

    # ------------------------------------------------------------------
    # Model-Facing Detail
    # ------------------------------------------------------------------

    field_descriptions: Dict[str, str] = field(default_factory=dict)
    enums: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    injected_fields: Tuple[str, ...] = field(default_factory=tuple)

    version: str = "1.0.0"

    # NOTE: Tuple used instead of List to preserve immutability
    tags: Tuple[str, ...] = field(default_factory=tuple)

    # ------------------------------------------------------------------
    # Validation Layer
    # ------------------------------------------------------------------

    def __post_init__(self):

        if not self.name or not isinstance(self.name, str):
            raise ValueError("Tool name must be a non-empty string.")

        if not self.connector_name or not isinstance(self.connector_name, str):
            raise ValueError("Connector name must be a non-empty string.")

        if not isinstance(self.input_schema, dict):
            raise TypeError("input_schema must be a dictionary.")

        if not isinstance(self.output_schema, dict):
            raise TypeError("output_schema must be a dictionary.")

        if not isinstance(self.version, str):
            raise TypeError("version must be a string.")

        for key, hint in self.input_schema.items():
            if not isinstance(hint, str) or hint.rstrip("?").lower() not in _HINT_SCHEMAS:
                raise ValueError(f"Unsupported input hint for '{key}': {hint!r}")

        for key in list(self.enums) + list(self.injected_fields):
            if key not in self.input_schema:
                raise ValueError(f"'{key}' is not declared in input_schema.")

        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "injected_fields", tuple(self.injected_fields))
        object.__setattr__(
            self,
            "enums",
            {k: tuple(v) for k, v in self.enums.items()},
        )

    # ------------------------------------------------------------------
    # Derived Properties
    # ------------------------------------------------------------------

    @property
    def key(self) -> str:
        return f"{self.name}:{self.version}"

    @property
    def required_fields(self) -> List[str]:
        return [
            k for k, hint in self.input_schema.items()
            if not hint.endswith("?")
        ]

    @property
    def parameter_schema(self) -> Dict[str, Any]:
        """JSON-schema object for the fields the LLM is expected to fill."""

        properties: Dict[str, Any] = {}

        for key, hint in self.input_schema.items():
            if key in self.injected_fields:
                continue

            prop = dict(_HINT_SCHEMAS[hint.rstrip("?").lower()])

            if key in self.enums:
                prop["enum"] = list(self.enums[key])

            if key in self.field_descriptions:
                prop["description"] = self.field_descriptions[key]

            properties[key] = prop

        required = [
            k for k in self.required_fields
            if k not in self.injected_fields
        ]

        return {
            "type": "object",
            "properties": properties,
            "required": required,
        }

    def to_function_spec(self) -> Dict[str, Any]:
        """OpenAI-style function definition."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema,
            },
        }

    def to_debug_string(self) -> str:
        return (
            f"[TOOL] {self.key} | connector={self.connector_name} | "
            f"inputs={sorted(self.input_schema)} | "
            f"outputs={sorted(self.output_schema)} | tags={list(self.tags)}"
        )
