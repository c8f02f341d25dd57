# The module is to define the base classes for all tools in the application.
# Date: 2025-09-02
# Version: 1.0.0

import json
from abc import ABC, abstractmethod
from pydantic import BaseModel
from typing import Dict, Any, Optional, Type
from cyber_mcp.models.common import ToolResult
from cyber_mcp.services.gateway import RequestGateway
from cyber_mcp.utils.logger import console


def error_message(error: BaseException) -> str:
    """Returns the readable text of an error, or its class name when the text is empty."""
    return str(error) or error.__class__.__name__


def error_result(subject: str, error: BaseException) -> ToolResult:
    """Converts a failure into the error envelope shared by every tool."""
    return ToolResult.text(f"Error fetching {subject}: {error_message(error)}", is_error=True)


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before execution.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            **kwargs: The arguments for the tool, validated against args_schema.

        Returns:
            A ToolResult holding exactly one content block.
        """
        pass

    def get_definition(self) -> Dict[str, Any]:
        """
        Returns the tool's definition in a format compliant with OpenAI's
        function-calling specification. This method is inherited by all tools.
        """
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.args_schema.model_json_schema()
            }
        }


class CyberListTool(BaseTool):
    """
    A tool that reads one list from a Cyber API endpoint.

    Subclasses declare the endpoint, the key the list is published under and
    the subject used in error messages. The list is taken from the
    'OutBlock_1' field of the response; a missing or null field counts as an
    empty list.
    """
    endpoint: str
    output_key: str
    subject: str
    result_field: str = "OutBlock_1"

    def __init__(self, gateway: Optional[RequestGateway] = None):
        super().__init__()
        self._gateway = gateway or RequestGateway()

    def build_params(self, **kwargs) -> Optional[Dict[str, str]]:
        """Maps validated tool arguments onto query parameters. No parameters by default."""
        return None

    def extract_list(self, data: Any) -> Any:
        items = data.get(self.result_field) if isinstance(data, dict) else None
        return [] if items is None else items

    async def execute(self, **kwargs) -> ToolResult:
        console.tool_call(self.name, kwargs)
        try:
            data = await self._gateway.get(self.endpoint, self.build_params(**kwargs))
            items = self.extract_list(data)
            console.success(f"Tool '{self.name}' executed successfully.")
            return ToolResult.text(json.dumps({self.output_key: items}, indent=2, ensure_ascii=False))
        except Exception as e:
            console.exception(f"An error occurred while executing tool '{self.name}'.")
            return error_result(self.subject, e)
