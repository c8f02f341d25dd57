# The module provides a FastAPI application that serves as the main entry point for the Cyber MCP server.
# Date: 2025-09-02
# Version: 1.0.0

from contextlib import asynccontextmanager
from fastapi import FastAPI
from cyber_mcp.api.v1.api import api_router
from cyber_mcp.core.config import get_settings
from cyber_mcp.models.api_models import HealthResponse
from cyber_mcp.utils.logger import console

settings = get_settings()


def _masked(secret: str) -> str:
    if not secret:
        return "(disabled)"
    return f"{secret[:4]}…{secret[-4:]}" if len(secret) > 8 else "****"


@asynccontextmanager
async def lifespan(app: FastAPI):
    console.rule(f"{settings.SERVER_NAME} v{settings.SERVER_VERSION}")
    console.display_settings({
        "Base URL": settings.CYBER_API_BASE_URL,
        "AUTH_KEY": _masked(settings.CYBER_API_AUTH_KEY),
        "Timeout (ms)": settings.CYBER_API_TIMEOUT_MS,
    }, title="Cyber API settings")
    yield


app = FastAPI(
    title=settings.SERVER_NAME,
    version=settings.SERVER_VERSION,
    description="Read-only tools for user, client and API path lookups against the Cyber API.",
    lifespan=lifespan,
)

@app.get("/", summary="Health Check", tags=["Status"], response_model=HealthResponse)
def read_root():
    """Root endpoint to check if the service is alive."""
    console.info("Health check endpoint was hit.")
    return HealthResponse(
        message="Cyber MCP Server is alive and running!",
        server=settings.SERVER_NAME,
        version=settings.SERVER_VERSION,
    )

# Include the v1 router with a global '/v1' prefix
app.include_router(api_router, prefix="/v1")
