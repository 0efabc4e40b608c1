# SPDX-License-Identifier: MIT
"""Video resolution helpers."""

from typing import Literal

from .config import logger
from .errors import InvalidSizeError

Orientation = Literal["vertical", "landscape"]

ORIENTATION_SIZES: dict[str, str] = {
    "vertical": "720x1280",  # 9:16 portrait
    "landscape": "1280x720",  # 16:9 widescreen
}

DEFAULT_ORIENTATION: Orientation = "vertical"


def resolve_size(orientation: Orientation | None = None, size: str | None = None) -> str:
    """Pick the output resolution for a video job.

    Precedence: orientation, then custom size (passed through unvalidated),
    then the vertical default.

    Args:
        orientation: "vertical" or "landscape"
        size: Custom resolution such as "1024x1792"

    Returns:
        Resolution string "<width>x<height>"
    """
    if orientation:
        if size:
            logger.info("Ignoring size=%s because orientation=%s was given", size, orientation)
        return ORIENTATION_SIZES[orientation]
    if size:
        return size
    return ORIENTATION_SIZES[DEFAULT_ORIENTATION]


def parse_video_dimensions(size: str) -> tuple[int, int]:
    """Parse "1280x720" into (1280, 720).

    Raises:
        InvalidSizeError: If the string is not two positive integers joined by "x"
    """
    parts = size.split("x")
    if len(parts) != 2:
        raise InvalidSizeError(f'Invalid size format: {size}. Expected format: "widthxheight" (e.g., "720x1280")')

    width_str, height_str = (p.strip() for p in parts)
    if not (width_str.isascii() and width_str.isdigit() and height_str.isascii() and height_str.isdigit()):
        raise InvalidSizeError(f"Invalid size dimensions: {size}. Width and height must be positive numbers.")

    width, height = int(width_str), int(height_str)
    if width <= 0 or height <= 0:
        raise InvalidSizeError(f"Invalid size dimensions: {size}. Width and height must be positive numbers.")
    return width, height
