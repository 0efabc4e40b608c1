# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for Sora video MCP server tests."""

import pathlib

import pytest
from PIL import Image

from sora_video_mcp.config import Settings


@pytest.fixture
def tmp_reference_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory for reference media."""
    ref_path = tmp_path / "references"
    ref_path.mkdir()
    return ref_path


@pytest.fixture
def tmp_video_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory for video downloads."""
    video_path = tmp_path / "videos"
    video_path.mkdir()
    return video_path


@pytest.fixture
def settings(tmp_video_path: pathlib.Path) -> Settings:
    """Settings with a fake credential and a temp download directory."""
    return Settings(api_key="sk-test-key", download_dir=tmp_video_path)


@pytest.fixture
def sample_image(tmp_reference_path: pathlib.Path) -> pathlib.Path:
    """Create a sample RGB image for testing.

    Returns path to a 200x100 RGB test image.
    """
    img_path = tmp_reference_path / "test.png"
    img = Image.new("RGB", (200, 100), color=(255, 0, 0))  # Red 200x100 image
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def sample_jpeg(tmp_reference_path: pathlib.Path) -> pathlib.Path:
    """Create a small 64x48 JPEG for upscale tests."""
    img_path = tmp_reference_path / "small.jpg"
    Image.new("RGB", (64, 48), color=(0, 0, 255)).save(img_path, "JPEG")
    return img_path


@pytest.fixture
def sample_rgba_image(tmp_reference_path: pathlib.Path) -> pathlib.Path:
    """Create a sample RGBA image for testing color conversion.

    Returns path to a 100x100 RGBA test image.
    """
    img_path = tmp_reference_path / "rgba.png"
    img = Image.new("RGBA", (100, 100), color=(0, 0, 255, 128))  # Semi-transparent blue
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def sample_video(tmp_reference_path: pathlib.Path) -> pathlib.Path:
    """Opaque bytes standing in for an MP4 file."""
    video_path = tmp_reference_path / "clip.mp4"
    video_path.write_bytes(b"\x00\x00\x00\x18ftypmp42" + bytes(range(256)))
    return video_path


# ==================== Integration Test Fixtures ====================


@pytest.fixture
def mock_video_response():
    """Sample completed Video object for mocking OpenAI video API responses."""
    from openai.types import Video

    return Video(
        id="abc123",
        object="video",  # Required by Pydantic
        status="completed",
        progress=100,
        model="sora-2",
        seconds="8",
        size="1280x720",
        created_at=1234567890,
    )


@pytest.fixture
def mock_video_queued():
    """Sample Video object in queued state."""
    from openai.types import Video

    return Video(
        id="vid_queued",
        object="video",  # Required by Pydantic
        status="queued",
        progress=0,
        model="sora-2",
        seconds="4",
        size="720x1280",
        created_at=1234567890,
    )


@pytest.fixture
def mock_video_in_progress():
    """Sample Video object still rendering."""
    from openai.types import Video

    return Video(
        id="abc123",
        object="video",
        status="in_progress",
        progress=40,
        model="sora-2",
        seconds="4",
        size="720x1280",
        created_at=1234567890,
    )
