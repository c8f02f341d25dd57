# The module is to define the API endpoints for listing and calling tools.
# Date: 2025-09-02
# Version: 1.0.0

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError
from cyber_mcp.core.tool_registry import ToolNotFoundError, tool_registry
from cyber_mcp.models.api_models import ToolListResponse
from cyber_mcp.models.common import ToolResult
from cyber_mcp.utils.logger import console

router = APIRouter()


@router.get("/", response_model=ToolListResponse)
def list_tools():
    """
    Returns the definitions of all registered tools.
    """
    return ToolListResponse(tools=tool_registry.get_definitions())


@router.post("/{tool_name}",
             response_model=ToolResult,
             response_model_exclude_none=True)
async def call_tool(tool_name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
    """
    Calls a tool by name. Tool failures are reported inside the result
    with isError set, not as HTTP errors.
    """
    console.info(f"Received call for tool '{tool_name}'")
    try:
        return await tool_registry.execute(tool_name, arguments)
    except ToolNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))
