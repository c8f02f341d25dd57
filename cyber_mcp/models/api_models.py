# The module is to define the API models for the application.
# Date: 2025-09-02
# Version: 1.0.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List


class HealthResponse(BaseModel):
    """
    Defines the response body for the root health check endpoint.
    Attributes:
        message (str): A human readable liveness message.
        server (str): The server name.
        version (str): The server version.
    """
    message: str
    server: str
    version: str


class ToolListResponse(BaseModel):
    """
    Defines the response body for the /v1/tools endpoint.
    Attributes:
        tools (List[Dict[str, Any]]): Function-calling definitions of all registered tools.
    """
    tools: List[Dict[str, Any]] = Field(default_factory=list, description="Definitions of all registered tools.")
