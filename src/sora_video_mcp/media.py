# SPDX-License-Identifier: MIT
"""Reference media preparation for video generation.

Sora rejects reference images whose dimensions differ from the requested
video size, so images are always cover-cropped to the target resolution.
Reference videos are uploaded untouched.
"""

import io
import pathlib
from dataclasses import dataclass

import aiofiles
import anyio
from PIL import Image

from .config import logger
from .errors import FileAccessError, InvalidSizeError, TransformError
from .sizing import parse_video_dimensions

IMAGE_MIME_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".webp": "image/webp",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}

VIDEO_MIME_TYPES: dict[str, str] = {
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
    ".webm": "video/webm",
}

DEFAULT_MIME_TYPE = "image/jpeg"
DEFAULT_MAX_PIXELS = 89_478_485  # Pillow's default MAX_IMAGE_PIXELS

# Pillow encoder per image MIME type
_PIL_FORMATS: dict[str, str] = {
    "image/png": "PNG",
    "image/webp": "WEBP",
    "image/jpeg": "JPEG",
}


@dataclass(frozen=True)
class ReferenceMedia:
    """A reference file ready to attach to a create request."""

    data: bytes
    mime_type: str
    filename: str

    def as_upload(self) -> tuple[str, bytes, str]:
        """Tuple form accepted by the OpenAI SDK for multipart file fields."""
        return (self.filename, self.data, self.mime_type)


def detect_mime_type(filename: str) -> str:
    """Get MIME type from filename extension, defaulting to image/jpeg."""
    ext = ("." + filename.rsplit(".", 1)[-1].lower()) if "." in filename else ""
    return IMAGE_MIME_TYPES.get(ext) or VIDEO_MIME_TYPES.get(ext) or DEFAULT_MIME_TYPE


def is_video_mime(mime_type: str) -> bool:
    return mime_type.startswith("video/")


def resize_crop(img: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """Scale to cover the target box, then center crop to exact dimensions."""
    img_ratio = img.width / img.height
    target_ratio = target_width / target_height

    if img_ratio > target_ratio:
        # Image is wider than target - fit height, crop width
        new_height = target_height
        new_width = max(target_width, round(img.width * (target_height / img.height)))
    else:
        # Image is taller than target - fit width, crop height
        new_width = target_width
        new_height = max(target_height, round(img.height * (target_width / img.width)))

    img = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

    left = (new_width - target_width) // 2
    top = (new_height - target_height) // 2
    return img.crop((left, top, left + target_width, top + target_height))


def check_pixel_budget(width: int, height: int) -> None:
    """Reject target sizes larger than Pillow's decompression-bomb limit."""
    limit = Image.MAX_IMAGE_PIXELS or DEFAULT_MAX_PIXELS
    if width * height > limit:
        raise InvalidSizeError(f"Invalid size dimensions: {width}x{height} exceeds {limit} pixels")


def normalize_mode(img: Image.Image) -> Image.Image:
    """Convert palette, grayscale and high bit-depth images to RGB or RGBA."""
    if img.mode in ("RGB", "RGBA"):
        return img
    has_alpha = "A" in img.getbands() or (img.mode == "P" and "transparency" in img.info)
    return img.convert("RGBA" if has_alpha else "RGB")


def encode_image(img: Image.Image, mime_type: str) -> bytes:
    """Encode an image in the format implied by its MIME type."""
    fmt = _PIL_FORMATS.get(mime_type, "JPEG")
    if fmt == "JPEG" and img.mode != "RGB":
        img = img.convert("RGB")

    buffer = io.BytesIO()
    img.save(buffer, fmt)
    return buffer.getvalue()


def _prepare_image(path: pathlib.Path, width: int, height: int, mime_type: str) -> bytes:
    with Image.open(path) as src:
        original_size = src.size
        resized = resize_crop(normalize_mode(src), width, height)
    data = encode_image(resized, mime_type)
    logger.info(
        "Prepared reference image %s (%dx%d -> %dx%d)",
        path.name,
        original_size[0],
        original_size[1],
        width,
        height,
    )
    return data


async def prepare_reference(path: str, target_size: str) -> ReferenceMedia:
    """Load a local reference file and make it match the target resolution.

    Args:
        path: Absolute or relative path to an image (JPEG, PNG, WEBP) or video (MP4, MOV, WEBM)
        target_size: Video resolution as "<width>x<height>"

    Returns:
        ReferenceMedia with the bytes to upload, MIME type and original filename

    Raises:
        FileAccessError: If the file is missing or unreadable
        InvalidSizeError: If target_size is malformed or too large for an image
        TransformError: If the image cannot be decoded, resized or encoded
    """
    file_path = pathlib.Path(path).expanduser().resolve()
    if not file_path.exists():
        raise FileAccessError(f"Reference file not found: {file_path}")
    if not file_path.is_file():
        raise FileAccessError(f"Reference path is not a file: {file_path}")

    mime_type = detect_mime_type(file_path.name)
    width, height = parse_video_dimensions(target_size)

    if is_video_mime(mime_type):
        # Video references must already match target_size; no transcoding here
        try:
            async with aiofiles.open(file_path, "rb") as f:
                data = await f.read()
        except OSError as e:
            raise FileAccessError(f"Failed to read reference video {file_path.name}: {e}") from e
        logger.info("Attached reference video %s (%d bytes, %s)", file_path.name, len(data), mime_type)
        return ReferenceMedia(data=data, mime_type=mime_type, filename=file_path.name)

    check_pixel_budget(width, height)
    try:
        data = await anyio.to_thread.run_sync(_prepare_image, file_path, width, height, mime_type)
    except (OSError, ValueError, MemoryError, Image.DecompressionBombError) as e:
        raise TransformError(f"Failed to process input_reference file {file_path.name}: {e}") from e

    return ReferenceMedia(data=data, mime_type=mime_type, filename=file_path.name)
