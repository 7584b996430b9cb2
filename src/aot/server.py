# src/aot/server.py
"""MCP stdio server exposing the engine's tools.

stdout carries the protocol; atoms and diagnostics are rendered on stderr.
"""

from __future__ import annotations

import asyncio
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from rich.console import Console

from aot import __version__
from aot.render import render_atom, render_payload
from aot.settings import Settings
from aot.tools import Toolbox, ToolResponse

SERVER_NAME = "atom-of-thoughts"


def build_server(toolbox: Toolbox) -> Server:
    """Register list/call handlers for ``toolbox`` on a new MCP server."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in toolbox.list_tools()
        ]

    # Input is validated by the engine so failures keep the tool's own error shape
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        response = toolbox.call_tool(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=response.text)],
            isError=response.is_error,
        )

    return server


def stderr_renderer(console: Console):
    """Callback that draws each ingested atom and its result summary."""

    def on_atom(response: ToolResponse) -> None:
        if response.atom is not None:
            console.print(render_atom(response.atom, response.max_depth))
        if response.payload is not None:
            console.print(render_payload(response.payload))

    return on_atom


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def serve(settings: Settings | None = None, max_depth: int | None = None) -> None:
    """Run the MCP server on stdio until the client disconnects."""
    settings = settings or Settings()
    console = Console(stderr=True)
    on_atom = stderr_renderer(console) if settings.render_atoms else None
    toolbox = Toolbox.create(settings=settings, max_depth=max_depth, on_atom=on_atom)

    console.print(
        "[dim]Atom of Thoughts MCP Server running on stdio "
        f"(max depth {toolbox.engine.max_depth})[/dim]"
    )
    asyncio.run(run_stdio(build_server(toolbox)))
