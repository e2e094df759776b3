"""End-to-end through an in-memory MCP client session."""
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from fulcrum_mcp.server import build_server


@pytest.mark.asyncio
async def test_list_tools_over_mcp(make_dispatcher):
    dispatcher, _ = make_dispatcher({})
    server = build_server(dispatcher)

    async with create_connected_server_and_client_session(server) as session:
        result = await session.list_tools()

    names = [t.name for t in result.tools]
    assert names[0] == "list_sales_orders"
    assert len(names) == 7
    get_job = next(t for t in result.tools if t.name == "get_job")
    assert get_job.inputSchema["required"] == ["jobId"]


@pytest.mark.asyncio
async def test_call_tool_over_mcp(make_dispatcher):
    dispatcher, stub = make_dispatcher({("GET", "/api/jobs/J-1"): (200, {"id": "J-1"})})
    server = build_server(dispatcher)

    async with create_connected_server_and_client_session(server) as session:
        ok = await session.call_tool("get_job", {"jobId": "J-1"})
        missing = await session.call_tool("get_job", {})
        unknown = await session.call_tool("drop_tables", {})

    assert ok.isError is False
    assert ok.content[0].text.startswith("**Job Details:**")
    assert missing.isError is True
    assert "jobId" in missing.content[0].text
    assert unknown.isError is True
    assert "Unknown tool: drop_tables" in unknown.content[0].text
    assert len(stub.requests) == 1
