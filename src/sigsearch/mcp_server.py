"""MCP server that exposes sigsearch signature search to MCP clients.

This server wraps the `sigsearch` CLI tool, providing structured access to
type-signature search through the Model Context Protocol.
"""

import json
import subprocess
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent


# Initialize MCP server
app = Server("sigsearch")


@app.list_tools()
async def list_tools() -> list[Tool]:
    """Declare available tools."""
    return [
        Tool(
            name="sigsearch_search",
            description=(
                "Find TypeScript functions, arrow-function bindings and class/interface "
                "methods whose type signature resembles a query signature. Signatures "
                "are written as '(ParamType, ...) -> ReturnType'. Returns the closest "
                "declarations in one file with their line numbers, best match first."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {
                        "type": "string",
                        "description": "Path to the TypeScript file to search (e.g., 'src/utils.ts')",
                    },
                    "query": {
                        "type": "string",
                        "description": "Signature to look for (e.g., '(number, number) -> number')",
                    },
                },
                "required": ["file", "query"],
            },
        ),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> list[TextContent]:
    """Handle tool calls by routing to the CLI."""
    if name == "sigsearch_search":
        return await _handle_search(arguments["file"], arguments["query"])

    raise ValueError(f"Unknown tool: {name}")


def format_results(file: str, results: list[dict]) -> str:
    """Format JSON search results as `path:line;  name :: signature` lines."""
    lines = []
    for result in results:
        declaration = result["declaration"]
        line = declaration["position"]["line"]
        lines.append(f"{file}:{line};  {declaration['name']} :: {declaration['signature']}")
    return "\n".join(lines)


async def _handle_search(file: str, query: str) -> list[TextContent]:
    """Handle sigsearch_search tool calls.

    Args:
        file: Path to the TypeScript file
        query: Signature-shaped query string

    Returns:
        List containing a single TextContent with the ranked declarations
    """
    try:
        result = subprocess.run(
            ["sigsearch", "search", "--json", "--", file, query],
            capture_output=True,
            text=True,
            check=True,
        )

        results = json.loads(result.stdout)

        if not results:
            return [
                TextContent(
                    type="text",
                    text=f"No declarations found in '{file}'",
                )
            ]

        return [
            TextContent(
                type="text",
                text=format_results(file, results),
            )
        ]

    except subprocess.CalledProcessError as e:
        error_msg = e.stderr.strip() if e.stderr else str(e)
        return [
            TextContent(
                type="text",
                text=f"Error running sigsearch search: {error_msg}",
            )
        ]
    except json.JSONDecodeError as e:
        return [
            TextContent(
                type="text",
                text=f"Error parsing sigsearch output: {e}",
            )
        ]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
