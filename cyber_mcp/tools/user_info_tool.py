# The module defines the tool that looks up users of the Cyber API by clientId.
# Date: 2025-09-02
# Version: 1.0.0

from pydantic import BaseModel, Field
from typing import Dict, Type
from .base_tool import CyberListTool


class GetUserInfoInput(BaseModel):
    """
    Input model for the GetUserInfoTool.
    Attributes:
        clientId (str): The clientId whose users should be looked up.
    """
    clientId: str = Field(..., description="The clientId to look up (e.g. test26).")


class GetUserInfoTool(CyberListTool):
    """
    Looks up user information for a single clientId.
    """
    name: str = "getUserInfo"
    description: str = "Looks up user information by clientId."
    args_schema: Type[BaseModel] = GetUserInfoInput

    endpoint: str = "/svc/mcp/getUserInfo"
    output_key: str = "users"
    subject: str = "user info"

    def build_params(self, clientId: str) -> Dict[str, str]:
        return {"clientId": clientId}
