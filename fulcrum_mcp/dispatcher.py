# dispatcher.py - tool lookup, argument binding and the result envelope
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import mcp.types as types

from fulcrum_mcp.catalog import CATALOG, ToolSpec
from fulcrum_mcp.client import FulcrumClient
from fulcrum_mcp.errors import FulcrumMCPError, ValidationError
from fulcrum_mcp.handlers import HANDLERS, Handler
from fulcrum_mcp.validator import validate_arguments

logger = logging.getLogger(__name__)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=is_error)


class ToolDispatcher:
    def __init__(
        self,
        client: FulcrumClient,
        catalog: Tuple[ToolSpec, ...] = CATALOG,
        handlers: Optional[Mapping[str, Handler]] = None,
    ):
        self.client = client
        self.catalog = catalog
        self.handlers: Dict[str, Handler] = dict(HANDLERS if handlers is None else handlers)
        self._specs = {spec.name: spec for spec in catalog}

    def list_tools(self) -> Tuple[ToolSpec, ...]:
        return self.catalog

    async def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> types.CallToolResult:
        """Run tool ``name``; every failure comes back as an ``isError`` result, never an exception."""
        try:
            spec = self._specs.get(name)
            handler = self.handlers.get(name)
            if spec is None or handler is None:
                raise ValidationError(f"Unknown tool: {name}")

            args, notes = validate_arguments(spec, arguments)
            if notes["added"] or notes["removed"] or notes["type_fixed"]:
                logger.debug(f"{name}: argument corrections {notes}")

            text = await handler(self.client, args)
            return text_result(text)
        except FulcrumMCPError as e:
            logger.warning(f"Error in {name}: {e}")
            return text_result(f"Error executing {name}: {e}", is_error=True)
        except Exception as e:
            logger.exception(f"Unexpected error in {name}")
            return text_result(f"Error executing {name}: {e}", is_error=True)
