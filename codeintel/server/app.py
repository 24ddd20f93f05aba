# -*- coding: utf-8 -*-
"""MCP server exposing the suggestion tools and resources over stdio."""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from ..constant import SERVER_NAME
from ..service import CodeIntelService
from .resources import (
    COMPONENT_LIBRARY_URI,
    USAGE_GUIDE_URI,
    read_resource,
)
from .tools import (
    ToolResult,
    query_component_tool,
    query_utility_tool,
    suggest_components_tool,
    suggest_utilities_tool,
)

logger = logging.getLogger(__name__)


def _unwrap(result: ToolResult) -> str:
    """Tool payload text; error payloads become a failed tool call."""
    text = "\n".join(item["text"] for item in result["content"])
    if result.get("isError"):
        raise ToolError(text)
    return text


def create_server(service: Optional[CodeIntelService] = None) -> FastMCP:
    """Build a FastMCP server bound to *service*."""
    if service is None:
        service = CodeIntelService()

    mcp = FastMCP(SERVER_NAME)

    # pylint: disable=invalid-name
    @mcp.tool()
    def suggest_components(prompt: str) -> str:
        """USE WHEN the user wants to create a page, form, component or
        any other UI. Recommends the best-fitting components from the
        private component library and returns an optimized prompt with
        concrete implementation notes.

        Args:
            prompt: The user's UI requirement, e.g. "build a login page".
        """
        logger.info("Calling tool: suggest_components")
        return _unwrap(suggest_components_tool(service, {"prompt": prompt}))

    @mcp.tool()
    def query_component(componentName: str) -> str:  # noqa: N803
        """Look up a component by exact name (import statement, path).

        Args:
            componentName: Component name, e.g. "das-button".
        """
        logger.info("Calling tool: query_component")
        return _unwrap(
            query_component_tool(service, {"componentName": componentName}),
        )

    @mcp.tool()
    def suggest_utilities(prompt: str) -> str:
        """USE WHEN the user needs logic such as formatting, conversion,
        encryption or validation. Recommends reusable utility functions so
        nothing is re-implemented.

        Args:
            prompt: The logic requirement, e.g. "format numbers with
                thousands separators".
        """
        logger.info("Calling tool: suggest_utilities")
        return _unwrap(suggest_utilities_tool(service, {"prompt": prompt}))

    @mcp.tool()
    def query_utility(utilityName: str) -> str:  # noqa: N803
        """Look up a utility by exact name (params, returns, import).

        Args:
            utilityName: Utility name, e.g. "formatNumber".
        """
        logger.info("Calling tool: query_utility")
        return _unwrap(
            query_utility_tool(service, {"utilityName": utilityName}),
        )

    @mcp.resource(
        COMPONENT_LIBRARY_URI,
        name="component-library",
        description="Every component in the private component library",
        mime_type="application/json",
    )
    def component_library() -> str:
        return read_resource(service, COMPONENT_LIBRARY_URI)

    @mcp.resource(
        USAGE_GUIDE_URI,
        name="usage-guide",
        description="Usage guide and best practices for the tools",
        mime_type="text/plain",
    )
    def usage_guide() -> str:
        return read_resource(service, USAGE_GUIDE_URI)

    return mcp


def run_server(service: Optional[CodeIntelService] = None) -> None:
    """Serve over stdio until the client disconnects."""
    server = create_server(service)
    logger.info("Code intelligence MCP server started")
    server.run()
