"""MCP server exposing Fulcrum ERP sales orders, jobs, items and inventory as tools."""

__version__ = "0.2.0"
