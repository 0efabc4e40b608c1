# SPDX-License-Identifier: MIT
"""Sora Video MCP Server - FastMCP server for OpenAI Sora video generation.

``create_server`` registers the tools against an explicit :class:`Settings`.
Business logic lives in :mod:`sora_video_mcp.tools.video`; this module only
maps tool parameters onto it and wraps every outcome in a result envelope.
"""

import sys
from typing import Literal

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from .config import Settings, load_settings, logger
from .descriptions import (
    CREATE_VIDEO,
    DELETE_VIDEO,
    DOWNLOAD_VIDEO,
    GET_VIDEO_STATUS,
    LIST_VIDEOS,
    REMIX_VIDEO,
    SAVE_VIDEO,
)
from .errors import ConfigurationError
from .results import render_download, render_save, run_tool
from .sizing import Orientation
from .tools import video

SERVER_NAME = "sora-video-mcp"


def create_server(settings: Settings) -> FastMCP:
    """Build the FastMCP server with all video tools registered."""
    mcp = FastMCP(
        SERVER_NAME,
        host=settings.host,
        port=settings.port,
        stateless_http=True,
        json_response=True,
    )

    @mcp.tool(name="create-video", title="Create Video", description=CREATE_VIDEO)
    async def create_video(
        prompt: str,
        model: str = "sora-2",
        seconds: str = "4",
        orientation: Orientation | None = None,
        size: str | None = None,
        input_reference: str | None = None,
    ):
        return await run_tool(
            "creating video",
            video.create_video(settings, prompt, model, seconds, orientation, size, input_reference),
        )

    @mcp.tool(name="remix-video", title="Remix Video", description=REMIX_VIDEO)
    async def remix_video(video_id: str, prompt: str):
        return await run_tool("remixing video", video.remix_video(settings, video_id, prompt))

    @mcp.tool(name="get-video-status", title="Get Video Status", description=GET_VIDEO_STATUS)
    async def get_video_status(video_id: str):
        return await run_tool("getting video status", video.get_video_status(settings, video_id))

    @mcp.tool(name="list-videos", title="List Videos", description=LIST_VIDEOS)
    async def list_videos(limit: int = 20, after: str | None = None, order: Literal["asc", "desc"] = "desc"):
        return await run_tool("listing videos", video.list_videos(settings, limit, after, order))

    @mcp.tool(name="download-video", title="Download Video", description=DOWNLOAD_VIDEO)
    async def download_video(video_id: str, variant: str | None = None):
        return await run_tool(
            "preparing video download",
            video.download_video(settings, video_id, variant),
            render=render_download,
        )

    @mcp.tool(name="save-video", title="Save Video", description=SAVE_VIDEO)
    async def save_video(video_id: str, output_path: str | None = None, filename: str | None = None):
        return await run_tool(
            "saving video",
            video.save_video(settings, video_id, output_path, filename),
            render=render_save,
        )

    @mcp.tool(name="delete-video", title="Delete Video", description=DELETE_VIDEO)
    async def delete_video(video_id: str):
        return await run_tool("deleting video", video.delete_video(settings, video_id))

    return mcp


def _startup() -> FastMCP:
    load_dotenv()  # Load environment variables at runtime
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("Error: %s", e)
        sys.exit(1)
    logger.info("Download directory: %s", settings.download_dir)
    return create_server(settings)


# ==================== SERVER ENTRYPOINTS ====================
def main():
    """Run the MCP server over stdio (for desktop chat clients)."""
    mcp = _startup()
    logger.info("Starting Sora video MCP server over stdio")
    mcp.run()


def main_http():
    """Run the MCP server over streamable HTTP at http://HOST:PORT/mcp."""
    mcp = _startup()
    logger.info(
        "Starting Sora video MCP server on http://%s:%d%s",
        mcp.settings.host,
        mcp.settings.port,
        mcp.settings.streamable_http_path,
    )
    mcp.run(transport="streamable-http")


if __name__ == "__main__":
    main()
