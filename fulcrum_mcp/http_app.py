# http_app.py - small HTTP wrapper for deployment health checks

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fulcrum_mcp.client import FulcrumClient
from fulcrum_mcp.config import Settings, init_runtime
from fulcrum_mcp.errors import FulcrumMCPError

logger = logging.getLogger(__name__)


def create_app(settings: Settings, client: Optional[FulcrumClient] = None) -> FastAPI:
    client = client or FulcrumClient(settings)
    app = FastAPI(title="Fulcrum MCP Server")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    @app.get("/")
    def status():
        return {
            "status": "OK",
            "service": "Fulcrum MCP Server",
            "apiUrl": settings.base_url,
            "hasApiToken": settings.has_token,
        }

    @app.get("/health")
    def health():
        """
        Simple health check to prove the container + app are running.
        """
        return {
            "status": "ok",
            "service": "fulcrum-mcp-server",
            "message": "MCP server container is up and HTTP wrapper is responding.",
        }

    @app.get("/test-auth")
    async def test_auth():
        """Validate the configured token with one sales-order call."""
        try:
            result = await client.call("/api/sales-orders", "GET")
        except FulcrumMCPError as e:
            logger.error(f"Authentication test failed: {e}")
            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": str(e),
                    "apiUrl": settings.base_url,
                    "hasToken": settings.has_token,
                },
            )
        return {
            "success": True,
            "message": "Successfully authenticated with Fulcrum API",
            "apiUrl": settings.base_url,
            "dataReceived": result is not None,
            "responseKeys": list(result) if isinstance(result, dict) else [],
        }

    return app


def main() -> None:
    import uvicorn

    settings = init_runtime()
    logger.info(f"HTTP server running on port {settings.http_port}")
    uvicorn.run(create_app(settings), host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    main()
