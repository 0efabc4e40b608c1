# SPDX-License-Identifier: MIT
"""Video generation tools using OpenAI's Sora API.

This module contains all video-related operations:
- Creating video generation jobs (with optional reference media)
- Remixing existing videos
- Checking status and listing jobs
- Download instructions and saving completed videos to disk
- Deleting videos
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Literal
from urllib.parse import urlencode

from openai import APIStatusError
from openai._types import Omit, omit

from ..config import Settings, get_client, logger
from ..errors import RemoteServiceError
from ..media import prepare_reference
from ..sizing import Orientation, resolve_size
from ..storage import save_stream, target_path
from ..types import DownloadInstructions, SaveResult, VideoList


@contextmanager
def _api_errors(prefix: str = "Sora API error") -> Iterator[None]:
    """Re-raise SDK status errors as RemoteServiceError with status and body."""
    try:
        yield
    except APIStatusError as e:
        raise RemoteServiceError(e.status_code, e.response.text, prefix) from e


def suffix_for_variant(variant: str | None) -> str:
    return {"thumbnail": "webp", "spritesheet": "jpg"}.get(variant or "video", "mp4")


async def create_video(
    settings: Settings,
    prompt: str,
    model: str = "sora-2",
    seconds: str = "4",
    orientation: Orientation | None = None,
    size: str | None = None,
    input_reference: str | None = None,
) -> dict[str, Any]:
    """Create a new video generation job.

    Args:
        settings: Process configuration
        prompt: Text description of video content
        model: Video generation model to use
        seconds: Clip duration as a string ("4", "8", "12")
        orientation: "vertical" or "landscape"; overrides size
        size: Custom resolution "<width>x<height>"
        input_reference: Local path to a reference image or video

    Returns:
        Video job as returned by the API (id, status, progress, ...)

    Raises:
        FileAccessError: If the reference file is missing or unreadable
        InvalidSizeError: If a reference is given and the size is malformed
        TransformError: If the reference image cannot be resized
        RemoteServiceError: If the API rejects the request
    """
    final_size = resolve_size(orientation, size)
    client = get_client(settings)

    if input_reference:
        media = await prepare_reference(input_reference, final_size)
        with _api_errors():
            video = await client.videos.create(
                model=model,
                prompt=prompt,
                seconds=seconds,
                size=final_size,
                input_reference=media.as_upload(),
            )
        logger.info("Started job %s (%s) with reference: %s", video.id, video.status, media.filename)
    else:
        with _api_errors():
            video = await client.videos.create(model=model, prompt=prompt, seconds=seconds, size=final_size)
        logger.info("Started job %s (%s)", video.id, video.status)

    return video.to_dict(mode="json")


async def remix_video(settings: Settings, video_id: str, prompt: str) -> dict[str, Any]:
    """Create a new video by remixing a completed one.

    Returns:
        NEW video job with a different id and status='queued'
    """
    client = get_client(settings)
    with _api_errors():
        video = await client.videos.remix(video_id, prompt=prompt)
    logger.info("Started remix %s (from %s)", video.id, video_id)
    return video.to_dict(mode="json")


async def get_video_status(settings: Settings, video_id: str) -> dict[str, Any]:
    client = get_client(settings)
    with _api_errors():
        video = await client.videos.retrieve(video_id)
    return video.to_dict(mode="json")


async def list_videos(
    settings: Settings,
    limit: int = 20,
    after: str | None = None,
    order: Literal["asc", "desc"] = "desc",
) -> VideoList:
    """List video jobs with pagination.

    Args:
        settings: Process configuration
        limit: Maximum videos to return (default 20)
        after: Cursor for pagination (ID of last item from previous page)
        order: Sort order by creation time (desc=newest first, asc=oldest first)

    Returns:
        VideoList with data array, has_more flag, and first/last IDs
    """
    client = get_client(settings)
    # Convert None to omit for OpenAI SDK (omit = field not sent in API request)
    after_param: str | Omit = omit if after is None else after
    with _api_errors():
        page = await client.videos.list(limit=limit, after=after_param, order=order)
    items = [v.to_dict(mode="json") for v in page.data]
    return {
        "object": "list",
        "data": items,
        "first_id": items[0]["id"] if items else None,
        "last_id": items[-1]["id"] if items else None,
        "has_more": bool(page.has_more),
    }


async def download_video(settings: Settings, video_id: str, variant: str | None = None) -> DownloadInstructions:
    """Build an authenticated download command for a completed video.

    Only the status endpoint is called; no content is fetched.

    Args:
        settings: Process configuration
        video_id: Video ID from create-video or remix-video
        variant: Asset to download (video, thumbnail, spritesheet); omitted means MP4

    Returns:
        DownloadInstructions; curl_command is empty unless status is 'completed'
    """
    client = get_client(settings)
    with _api_errors():
        video = await client.videos.retrieve(video_id)

    output_filename = f"{video_id}.{suffix_for_variant(variant)}"

    if video.status != "completed":
        return {
            "video_id": video_id,
            "status": video.status,
            "message": f"Video is not ready yet. Current status: {video.status}",
            "download_instructions": "Video is not ready for download yet.",
            "curl_command": "",
            "output_filename": output_filename,
        }

    query = f"?{urlencode({'variant': variant})}" if variant else ""
    download_url = f"{settings.api_base}/videos/{video_id}/content{query}"
    curl_command = f'curl -H "Authorization: Bearer {settings.api_key}" "{download_url}" -o "{output_filename}"'

    return {
        "video_id": video_id,
        "status": "completed",
        "message": "Video is ready for download! Use the curl command below to download it.",
        "download_instructions": (
            "The video requires authentication. "
            "Use the provided curl command or add Authorization header with your API key."
        ),
        "curl_command": curl_command,
        "output_filename": output_filename,
    }


async def save_video(
    settings: Settings,
    video_id: str,
    output_path: str | None = None,
    filename: str | None = None,
) -> SaveResult:
    """Download a completed video and write it to local disk.

    The content endpoint is only called once the status check reports 'completed'.

    Args:
        settings: Process configuration
        video_id: Video ID from create-video or remix-video
        output_path: Directory to save into (defaults to the configured download directory)
        filename: Custom filename (defaults to <video_id>.mp4)

    Returns:
        SaveResult with status 'saved' and the absolute file path, or the remote
        status and an empty file_path when the video is not ready

    Raises:
        RemoteServiceError: If the status check or content download fails
        FileAccessError: If the directory cannot be created or filename is invalid
    """
    client = get_client(settings)
    with _api_errors():
        video = await client.videos.retrieve(video_id)

    if video.status != "completed":
        return {
            "video_id": video_id,
            "status": video.status,
            "file_path": "",
            "message": f"Video is not ready yet. Current status: {video.status}",
        }

    # Destination is checked before the content endpoint is called
    save_path = target_path(output_path or settings.download_dir, filename or f"{video_id}.mp4")

    with _api_errors("Failed to download video"):
        async with client.with_streaming_response.videos.download_content(video_id) as response:
            file_path = await save_stream(response.iter_bytes(), save_path)

    logger.info("Saved %s to %s", video_id, file_path)
    return {
        "video_id": video_id,
        "status": "saved",
        "file_path": str(file_path),
        "message": f"Video saved successfully to {file_path}",
    }


async def delete_video(settings: Settings, video_id: str) -> dict[str, Any]:
    """Permanently delete a video from OpenAI storage.

    Returns:
        Confirmation merged with the API response (API fields take precedence)
    """
    client = get_client(settings)
    with _api_errors():
        resp = await client.videos.delete(video_id)
    logger.info("Deleted %s", video_id)
    return {
        "id": video_id,
        "deleted": True,
        "message": f"Successfully deleted video {video_id}",
        **resp.to_dict(mode="json"),
    }
