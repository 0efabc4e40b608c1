# SPDX-License-Identifier: MIT
"""Tool descriptions for MCP server. Optimized for token efficiency."""

CREATE_VIDEO = """Create Sora video. Returns video id (async). Poll get-video-status until completed, then save-video.

Params: prompt, model (sora-2 faster|sora-2-pro quality), seconds ("4"|"8"|"12"), orientation (vertical 720x1280|landscape 1280x720, default vertical), size (custom "WxH", ignored when orientation is set), input_reference (path to JPEG/PNG/WEBP image or MP4/MOV/WEBM video)

Images are auto-resized (cover + center crop) to the video size. Videos must already match it.

Example: create-video(prompt="cat walking", orientation="landscape", seconds="8")"""

REMIX_VIDEO = """Create new video by remixing a completed video with a different prompt. Returns new video id (async).

Params: video_id (must be completed), prompt"""

GET_VIDEO_STATUS = """Poll video generation status. Call repeatedly until status='completed' or 'failed'.

Returns: id, status (queued|in_progress|completed|failed), progress (0-100), model, seconds, size"""

LIST_VIDEOS = """List video jobs with pagination.

Params: limit (default 20), after (video id cursor), order (desc|asc)

Returns: data (array), has_more, last_id (use as 'after' for next page)"""

DOWNLOAD_VIDEO = """Get an authenticated curl command to download a completed video. Does not fetch the file.

Params: video_id, variant (optional: video|thumbnail|spritesheet)"""

SAVE_VIDEO = """Download a completed video and save it to disk. Returns the local file path.

Params: video_id, output_path (directory, default DOWNLOAD_DIR), filename (default <video_id>.mp4)"""

DELETE_VIDEO = """Permanently delete a video job and its assets from OpenAI. Cannot be undone. Does not delete local files.

Params: video_id"""
