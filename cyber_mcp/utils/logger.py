# This file is part of the Cyber MCP server for logging and console management.
# Date: 2025-09-02
# Version: 1.0.0

import logging
from typing import Any, Dict, Mapping
from rich.logging import RichHandler
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# Define a custom logging level for success messages
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)

# Register the custom success method to the logging.Logger class
if not hasattr(logging.Logger, 'success'):
    setattr(logging.Logger, 'success', success_log)

class ConsoleManager:
    """
    A singleton that owns the console output of the Cyber MCP server.
    Log records go through a RichHandler on stderr, outgoing Cyber API
    requests and tool calls get their own styled lines.
    """
    def __init__(self, logger_name: str = "Cyber-MCP"):
        custom_theme = Theme({
            "logging.level.success": "bold green",
            "cyber.method": "bold cyan",
            "cyber.tool": "bold magenta",
        })
        self._console = Console(theme=custom_theme, stderr=True)
        self._logger = self._setup_logger(logger_name)

    def _setup_logger(self, logger_name: str) -> logging.Logger:
        logger = logging.getLogger(logger_name)
        if logger.hasHandlers():
            return logger

        logger.setLevel(logging.INFO)
        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            markup=True,
            keywords=["GET", "SUCCESS", "WARNING", "ERROR"],
            show_path=False
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        return logger

    def info(self, message: str):
        self._logger.info(escape(message))

    def success(self, message: str):
        self._logger.success(escape(message))

    def warning(self, message: str):
        self._logger.warning(escape(message))

    def error(self, message: str):
        self._logger.error(escape(message))

    def exception(self, message: str):
        self._logger.exception(escape(message))

    def request(self, method: str, url: Any):
        """Logs an outgoing Cyber API request."""
        self._logger.info(f"[cyber.method]{method}[/cyber.method] {escape(str(url))}")

    def tool_call(self, tool_name: str, arguments: Mapping[str, Any]):
        """Logs a tool invocation together with its validated arguments."""
        rendered = ", ".join(f"{key}={value!r}" for key, value in arguments.items()) or "no arguments"
        self._logger.info(f"Executing tool [cyber.tool]{escape(tool_name)}[/cyber.tool] with {escape(rendered)}")

    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(f"[bold {style}]{escape(title)}[/bold {style}]", style=style)

    def display_settings(self, settings: Dict[str, Any], title: str):
        table = Table(show_header=True, header_style="bold magenta", box=None, show_edge=False)
        table.add_column("Parameter", style="cyan", no_wrap=True, width=24)
        table.add_column("Value", style="white")
        for key, value in settings.items():
            table.add_row(key, escape(str(value)))

        panel = Panel(table, title=f"[bold green]✓ {escape(title)}[/bold green]", border_style="green")
        self._console.print(panel)

# Create a singleton instance for global use
console = ConsoleManager()
