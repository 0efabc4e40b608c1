# SPDX-License-Identifier: MIT
"""Tool result envelopes.

Every tool returns a ``CallToolResult``: a text block plus
``structuredContent`` on success, or a text block with ``isError=True``.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.types import CallToolResult, TextContent

from .config import logger


def success(output: dict[str, Any], text: str | None = None) -> CallToolResult:
    """Wrap a tool output. Text defaults to the pretty-printed JSON of *output*."""
    if text is None:
        text = json.dumps(output, indent=2, default=str)
    return CallToolResult(content=[TextContent(type="text", text=text)], structuredContent=output)


def failure(action: str, error: BaseException) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=f"Error {action}: {error}")], isError=True)


async def run_tool(
    action: str,
    operation: Awaitable[dict[str, Any]],
    render: Callable[[dict[str, Any]], str | None] | None = None,
) -> CallToolResult:
    """Await a tool operation and convert its outcome into an envelope.

    Args:
        action: Gerund phrase used in error text, e.g. "creating video"
        operation: Coroutine producing the structured output
        render: Optional function giving human text for the output (None falls back to JSON)

    Returns:
        Success or error CallToolResult; exceptions never escape
    """
    try:
        output = await operation
    except Exception as e:
        logger.error("Error %s: %s", action, e)
        return failure(action, e)
    return success(output, render(output) if render else None)


def render_download(output: dict[str, Any]) -> str | None:
    """Human text for a ready download; None (JSON) when the video is not ready."""
    if output.get("status") != "completed":
        return None
    video_id = output["video_id"]
    return (
        f"Video {video_id} is ready for download!\n\n"
        f"To download the video, run this command in your terminal:\n\n"
        f"{output['curl_command']}\n\n"
        f'This will save the video as "{output["output_filename"]}" in your current directory.'
    )


def render_save(output: dict[str, Any]) -> str | None:
    """Human text for a saved video; None (JSON) when the video is not ready."""
    if output.get("status") != "saved":
        return None
    return (
        f"Video downloaded successfully!\n\nSaved to: {output['file_path']}\n\nYou can now open and watch your video!"
    )
