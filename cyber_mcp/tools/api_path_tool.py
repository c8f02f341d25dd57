# The module defines the tool that lists the API paths (menus/routes) known to the Cyber API.
# Date: 2025-09-02
# Version: 1.0.0

from pydantic import BaseModel
from typing import Type
from .base_tool import CyberListTool


class GetApiPathInput(BaseModel):
    """Input model for the GetApiPathTool. The tool takes no arguments."""


class GetApiPathTool(CyberListTool):
    """
    Lists the API paths exposed by the Cyber API, such as menu entries and routes.
    """
    name: str = "getApiPath"
    description: str = "Lists the API paths (menus/routes)."
    args_schema: Type[BaseModel] = GetApiPathInput

    endpoint: str = "/svc/mcp/apipath"
    output_key: str = "paths"
    subject: str = "api paths"
