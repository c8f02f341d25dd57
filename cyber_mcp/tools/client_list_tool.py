# The module defines the tool that lists the clients registered with the Cyber API.
# Date: 2025-09-02
# Version: 1.0.0

from pydantic import BaseModel
from typing import Type
from .base_tool import CyberListTool


class GetClientInput(BaseModel):
    """Input model for the GetClientTool. The tool takes no arguments."""


class GetClientTool(CyberListTool):
    """
    Lists every client registered with the Cyber API.
    """
    name: str = "getClient"
    description: str = "Lists the registered clients."
    args_schema: Type[BaseModel] = GetClientInput

    endpoint: str = "/svc/mcp/getClient"
    output_key: str = "clients"
    subject: str = "clients"
