"""Tool registry — register and dispatch agent tools."""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..media.results import error_result

logger = logging.getLogger("feishu_media.tools.registry")


@dataclass
class Tool:
    name: str
    description: str
    parameters: dict                            # JSON Schema for parameters
    handler: Callable[[dict], Awaitable[dict]]  # async fn(arguments) -> envelope
    label: str = ""


class ToolRegistry:
    """Manages available tools for the agent."""

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def register(
        self,
        name: str,
        description: str,
        parameters: dict,
        handler: Callable[[dict], Awaitable[dict]],
        label: str = "",
    ):
        """Register a new tool. Re-registering a name replaces it."""
        self._tools[name] = Tool(
            name=name,
            description=description,
            parameters=parameters,
            handler=handler,
            label=label or name,
        )

    def unregister(self, name: str):
        """Remove a tool."""
        self._tools.pop(name, None)

    def get(self, name: str) -> Optional[Tool]:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """List registered tools."""
        return list(self._tools.values())

    def to_openai_schema(self) -> list[dict]:
        """Convert available tools to OpenAI function calling format."""
        return [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for tool in self.list_tools()
        ]

    async def execute(self, name: str, arguments: Optional[dict] = None) -> dict:
        """Execute a tool by name and return its result envelope."""
        tool = self.get(name)
        if not tool:
            return error_result(f"Tool '{name}' not found").to_dict()

        try:
            return await tool.handler(arguments or {})
        except Exception as e:
            logger.error(f"Error executing tool '{name}': {e}")
            return error_result(f"Error executing '{name}': {e}").to_dict()
