"""MCP server for jsoutline-mcp."""

import asyncio
import json
import os
from typing import Any

from mcp.server import Server
from mcp.types import Tool, TextContent

from .logger import logger, setup_logging
from .tools.get_source_outline import get_source_outline
from .tools.get_file_outline import get_file_outline
from .tools.get_folder_outline import get_folder_outline


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}

# Options shared by every outline tool
OUTLINE_OPTION_PROPERTIES = {
    "show_arguments": {
        "type": "boolean",
        "description": "Include parameter lists (and class superclasses) in signatures. Defaults to JSOUTLINE_SHOW_ARGUMENTS or true."
    },
    "show_unnamed": {
        "type": "boolean",
        "description": "Include functions with no recoverable name, labelled by category. Defaults to JSOUTLINE_SHOW_UNNAMED or true."
    },
    "sort_alphabetically": {
        "type": "boolean",
        "description": "Sort entries by name (unnamed first) instead of document order. Defaults to JSOUTLINE_SORT or false."
    },
    "nested": {
        "type": "boolean",
        "description": "Return entries as a tree following nesting depth. Ignored when sorting.",
        "default": False
    },
}


# Create server
server = Server("jsoutline-mcp")


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logger.warning("Ignoring unrecognized boolean setting", name=name, value=raw)
    return default


def _outline_options(arguments: dict) -> dict[str, Any]:
    """Resolve tool options, falling back to environment defaults."""
    return {
        "show_arguments": arguments.get(
            "show_arguments", env_flag("JSOUTLINE_SHOW_ARGUMENTS", True)
        ),
        "show_unnamed": arguments.get(
            "show_unnamed", env_flag("JSOUTLINE_SHOW_UNNAMED", True)
        ),
        "sort_alphabetically": arguments.get(
            "sort_alphabetically", env_flag("JSOUTLINE_SORT", False)
        ),
        "nested": arguments.get("nested", False),
    }


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_source_outline",
            description="Get the outline (functions, classes, methods, arrows, generators) of JavaScript source text. Unparseable source yields an empty outline.",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "JavaScript source text"
                    },
                    **OUTLINE_OPTION_PROPERTIES,
                },
                "required": ["content"]
            }
        ),
        Tool(
            name="get_file_outline",
            description="Get the outline of a JavaScript file (.js, .jsx, .mjs, .cjs) with names, positions, signatures and nesting depth.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the file (absolute or relative, supports ~ for home directory)"
                    },
                    **OUTLINE_OPTION_PROPERTIES,
                },
                "required": ["file_path"]
            }
        ),
        Tool(
            name="get_folder_outline",
            description="Outline every JavaScript file in a local folder, skipping dependencies, build output and minified bundles.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to local folder (absolute or relative, supports ~ for home directory)"
                    },
                    "max_files": {
                        "type": "integer",
                        "description": "Maximum number of files to outline",
                        "default": 500
                    },
                    **OUTLINE_OPTION_PROPERTIES,
                },
                "required": ["path"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        options = _outline_options(arguments)

        if name == "get_source_outline":
            result = get_source_outline(content=arguments["content"], **options)
        elif name == "get_file_outline":
            result = get_file_outline(file_path=arguments["file_path"], **options)
        elif name == "get_folder_outline":
            result = get_folder_outline(
                path=arguments["path"],
                max_files=arguments.get("max_files", 500),
                **options
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.error("Tool call failed", tool=name, exc=e)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    logger.info("Starting MCP server", server=server.name)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    setup_logging(os.environ.get("JSOUTLINE_LOG_LEVEL", "WARNING"))
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
