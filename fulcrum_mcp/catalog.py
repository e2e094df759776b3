# catalog.py - static tool catalog (names, descriptions, parameter schemas)
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import mcp.types as types


@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None
    items: Optional[str] = None
    enum: Optional[Tuple[Any, ...]] = None
    minimum: Optional[float] = None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.items:
            schema["items"] = {"type": self.items}
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    params: Tuple[ParamSpec, ...] = ()

    def param(self, name: str) -> Optional[ParamSpec]:
        for p in self.params:
            if p.name == name:
                return p
        return None

    def input_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
        }
        required = [p.name for p in self.params if p.required]
        if required:
            schema["required"] = required
        return schema

    def to_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema())


def _limit(default: int, what: str) -> ParamSpec:
    return ParamSpec("limit", "number", f"Maximum number of {what} to return", default=default, minimum=1)


def _resource_id(name: str, what: str) -> ParamSpec:
    return ParamSpec(name, "string", f"The ID of the {what} to retrieve", required=True)


CATALOG: Tuple[ToolSpec, ...] = (
    ToolSpec(
        "list_sales_orders",
        "Get a list of sales orders from Fulcrum",
        (
            _limit(20, "sales orders"),
            ParamSpec("includeCustomFields", "boolean", "Include custom fields in the response", default=False),
        ),
    ),
    ToolSpec(
        "get_sales_order",
        "Get details about a specific sales order",
        (_resource_id("salesOrderId", "sales order"),),
    ),
    ToolSpec(
        "list_jobs",
        "Get a list of work orders/jobs from Fulcrum",
        (
            _limit(20, "jobs"),
            ParamSpec(
                "statusFilter",
                "array",
                'Filter jobs by status (e.g., ["Active", "Complete"])',
                items="string",
            ),
        ),
    ),
    ToolSpec(
        "get_job",
        "Get details about a specific job/work order",
        (_resource_id("jobId", "job"),),
    ),
    ToolSpec(
        "list_items",
        "Get a list of items/parts from Fulcrum inventory",
        (
            _limit(50, "items"),
            ParamSpec("searchTerm", "string", "Search for items by name or item number"),
        ),
    ),
    ToolSpec(
        "get_item",
        "Get details about a specific item/part",
        (_resource_id("itemId", "item"),),
    ),
    ToolSpec(
        "get_inventory_summary",
        "Get inventory levels and stock information",
        (ParamSpec("itemId", "string", "Get inventory for a specific item (optional)"),),
    ),
)

TOOLS_BY_NAME: Dict[str, ToolSpec] = {t.name: t for t in CATALOG}
