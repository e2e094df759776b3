# server.py - MCP stdio server exposing the Fulcrum tool catalog
import sys
import asyncio
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from fulcrum_mcp import __version__
from fulcrum_mcp.client import FulcrumClient
from fulcrum_mcp.config import Settings, init_runtime
from fulcrum_mcp.dispatcher import ToolDispatcher

logger = logging.getLogger("fulcrum_mcp")

SERVER_NAME = "fulcrum-mcp-server"


def build_server(dispatcher: ToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [spec.to_tool() for spec in dispatcher.list_tools()]

    # the dispatcher validates arguments itself and reports failures as isError results
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        return await dispatcher.invoke(name, arguments)

    return server


async def serve(settings: Settings) -> None:
    dispatcher = ToolDispatcher(FulcrumClient(settings))
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"Fulcrum MCP server running on stdio (api={settings.base_url})")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = init_runtime()
    logger.info(f"API token loaded: {'Yes' if settings.has_token else 'No'}")
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted - MCP connection closed")
        sys.exit(0)


if __name__ == "__main__":
    main()
