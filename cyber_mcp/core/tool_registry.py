# Discovers and manages all available tools automatically.
# Date: 2025-09-02
# Version: 1.0.0

import importlib
import inspect
import pkgutil
from typing import Dict, List, Any, Optional
from cyber_mcp import tools as tools_package
from cyber_mcp.models.common import ToolResult
from cyber_mcp.services.gateway import RequestGateway
from cyber_mcp.tools.base_tool import BaseTool, CyberListTool
from cyber_mcp.utils.logger import console


class ToolNotFoundError(ValueError):
    """Raised when a tool name is not registered."""


class ToolRegistry:
    """
    A class to automatically discover, register, and manage tools.
    All discovered Cyber API tools share the gateway handed to the registry.
    """
    def __init__(self, gateway: Optional[RequestGateway] = None):
        self.tools: Dict[str, BaseTool] = {}
        self._gateway = gateway or RequestGateway()
        self._discover_tools()
        console.success(f"Tool discovery complete. Found {len(self.tools)} tools: {list(self.tools.keys())}")

    def _discover_tools(self):
        """
        Scans the cyber_mcp.tools package, imports all modules, finds concrete
        classes defined there that inherit from BaseTool, and registers an
        instance of each.
        """
        for _, modname, _ in pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}."):
            if modname == f"{tools_package.__name__}.base_tool":
                continue
            try:
                module = importlib.import_module(modname)
                for _, obj in inspect.getmembers(module, inspect.isclass):
                    if (issubclass(obj, BaseTool) and obj.__module__ == module.__name__
                            and not inspect.isabstract(obj)):
                        self.register(self._instantiate(obj))
            except Exception as e:
                console.error(f"Failed to load or register tool from module {modname}: {e}")

    def _instantiate(self, tool_class: type) -> BaseTool:
        if issubclass(tool_class, CyberListTool):
            return tool_class(gateway=self._gateway)
        return tool_class()

    def register(self, tool: BaseTool):
        self.tools[tool.name] = tool
        console.info(f"Successfully registered tool: '{tool.name}'")

    def get(self, tool_name: str) -> BaseTool:
        if tool_name not in self.tools:
            console.error(f"Attempted to access unknown tool: {tool_name}")
            raise ToolNotFoundError(f"Tool '{tool_name}' not found.")
        return self.tools[tool_name]

    def get_definitions(self) -> List[Dict[str, Any]]:
        """Returns the list of all tool definitions."""
        return [tool.get_definition() for tool in self.tools.values()]

    async def execute(self, tool_name: str, kwargs: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Validates the arguments against the tool's schema and executes the tool.
        Raises ToolNotFoundError for unknown names and pydantic.ValidationError
        for arguments that do not match the schema.
        """
        tool = self.get(tool_name)
        arguments = tool.args_schema.model_validate(kwargs or {})
        return await tool.execute(**arguments.model_dump())


# Create a singleton instance for global use throughout the application.
tool_registry = ToolRegistry()
