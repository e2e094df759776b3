# handlers.py - one coroutine per tool: build request -> call Fulcrum -> format text
import functools
from typing import Any, Awaitable, Callable, Dict
from urllib.parse import quote

from fulcrum_mcp.client import FulcrumClient
from fulcrum_mcp.errors import ToolExecutionError
from fulcrum_mcp.formatting import dollars, extract_records, field, pluck, render_json, render_records

Handler = Callable[[FulcrumClient, Dict[str, Any]], Awaitable[str]]

HANDLERS: Dict[str, Handler] = {}


def tool_handler(name: str, failure: str):
    """Register a handler for tool ``name``; any failure is re-raised as ``"<failure>: <cause>"``."""
    def decorator(fn: Handler) -> Handler:
        @functools.wraps(fn)
        async def wrapper(client: FulcrumClient, args: Dict[str, Any]) -> str:
            try:
                return await fn(client, args)
            except Exception as e:
                raise ToolExecutionError(f"{failure}: {e}") from e

        HANDLERS[name] = wrapper
        return wrapper
    return decorator


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


# -------------------------
# Sales orders
# -------------------------
SALES_ORDER_FIELDS = (
    field("Customer", "customer.name", default="Unknown Customer"),
    field("Status", "status"),
    field("Total", "totalAmount", default=0, render=dollars),
    field("Due", "dueDate", default="No due date"),
    field("Created", "createdDateUtc", "createdDate"),
)

NO_SALES_ORDERS = (
    "No sales orders found. This could mean:\n"
    "- No sales orders exist in your Fulcrum account\n"
    "- API permissions may be limited\n"
    "- Check if you have access to sales order data"
)


@tool_handler("list_sales_orders", "Failed to list sales orders")
async def list_sales_orders(client: FulcrumClient, args: Dict[str, Any]) -> str:
    body = {"includeCustomFields": args["includeCustomFields"], "pageSize": args["limit"]}
    result = await client.call("/api/sales-orders/list", "POST", body)
    orders = extract_records(result, "data", "salesOrders")
    if not orders:
        return NO_SALES_ORDERS
    return render_records(
        f"Sales Orders ({len(orders)} found)",
        orders,
        lambda o: f"**Order #{pluck(o, 'orderNumber', default='N/A')}** (ID: {pluck(o, 'id', default='N/A')})",
        SALES_ORDER_FIELDS,
    )


@tool_handler("get_sales_order", "Failed to get sales order")
async def get_sales_order(client: FulcrumClient, args: Dict[str, Any]) -> str:
    result = await client.call(f"/api/sales-orders/{_segment(args['salesOrderId'])}")
    return render_json("Sales Order Details", result)


# -------------------------
# Jobs / work orders
# -------------------------
JOB_FIELDS = (
    field("Description", "description", default="No description"),
    field("Status", "status"),
    field("Quantity", "quantityToManufacture", default=0),
    field("Due", "productionDueDate", "dueDate", default="No due date"),
)

NO_JOBS = (
    "No jobs found. This could mean:\n"
    "- No work orders exist in your Fulcrum account\n"
    "- Status filter excluded all jobs\n"
    "- Check if you have access to job data"
)


@tool_handler("list_jobs", "Failed to list jobs")
async def list_jobs(client: FulcrumClient, args: Dict[str, Any]) -> str:
    body: Dict[str, Any] = {"pageSize": args["limit"]}
    if args.get("statusFilter"):
        body["statusFilter"] = args["statusFilter"]
    result = await client.call("/api/jobs/list", "POST", body)
    jobs = extract_records(result, "data", "jobs")
    if not jobs:
        return NO_JOBS
    return render_records(
        f"Jobs/Work Orders ({len(jobs)} found)",
        jobs,
        lambda j: f"**Job #{pluck(j, 'jobNumber', default='N/A')}** (ID: {pluck(j, 'id', default='N/A')})",
        JOB_FIELDS,
    )


@tool_handler("get_job", "Failed to get job")
async def get_job(client: FulcrumClient, args: Dict[str, Any]) -> str:
    result = await client.call(f"/api/jobs/{_segment(args['jobId'])}")
    return render_json("Job Details", result)


# -------------------------
# Items / parts
# -------------------------
ITEM_FIELDS = (
    field("Description", "description", default="No description"),
    field("Type", "makeOrBuy"),
    field("Unit", "unitOfMeasure", default="EA"),
)


@tool_handler("list_items", "Failed to list items")
async def list_items(client: FulcrumClient, args: Dict[str, Any]) -> str:
    search_term = (args.get("searchTerm") or "").strip()
    body: Dict[str, Any] = {"pageSize": args["limit"]}
    if search_term:
        body["searchTerm"] = search_term
    result = await client.call("/api/items/list", "POST", body)
    items = extract_records(result, "data", "items")
    if not items:
        return f'No items found matching "{search_term}"' if search_term else "No items found in inventory"
    return render_records(
        f"Items ({len(items)} found)",
        items,
        lambda i: f"**{pluck(i, 'itemNumber', default='N/A')}** (ID: {pluck(i, 'id', default='N/A')})",
        ITEM_FIELDS,
    )


@tool_handler("get_item", "Failed to get item")
async def get_item(client: FulcrumClient, args: Dict[str, Any]) -> str:
    result = await client.call(f"/api/items/{_segment(args['itemId'])}")
    return render_json("Item Details", result)


# -------------------------
# Inventory
# -------------------------
INVENTORY_FIELDS = (
    field("On Hand", "onHandQuantity", default=0),
    field("Available", "availableQuantity", default=0),
    field("Reserved", "reservedQuantity", default=0),
)


@tool_handler("get_inventory_summary", "Failed to get inventory summary")
async def get_inventory_summary(client: FulcrumClient, args: Dict[str, Any]) -> str:
    item_id = args.get("itemId")
    body: Dict[str, Any] = {"itemId": item_id} if item_id else {}
    result = await client.call("/api/inventory/list", "POST", body)
    inventory = extract_records(result, "data", "inventory")
    if not inventory:
        return f"No inventory found for item {item_id}" if item_id else "No inventory data found"
    return render_records(
        f"Inventory Summary ({len(inventory)} items)",
        inventory,
        lambda inv: f"**{pluck(inv, 'item.itemNumber', default='Unknown')}** (Item ID: {pluck(inv, 'itemId', default='N/A')})",
        INVENTORY_FIELDS,
    )
