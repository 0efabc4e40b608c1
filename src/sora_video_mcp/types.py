# SPDX-License-Identifier: MIT
"""Structured outputs returned by the video tools."""

from typing import Any, TypedDict


class VideoList(TypedDict):
    """Page of video jobs."""

    object: str
    data: list[dict[str, Any]]
    first_id: str | None
    last_id: str | None
    has_more: bool


class DownloadInstructions(TypedDict):
    """Result from download-video: a curl command once the video is completed."""

    video_id: str
    status: str
    message: str
    download_instructions: str
    curl_command: str
    output_filename: str


class SaveResult(TypedDict):
    """Result from save-video."""

    video_id: str
    status: str
    file_path: str
    message: str
