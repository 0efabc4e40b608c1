# SPDX-License-Identifier: MIT
"""Local filesystem sink for downloaded video content.

Downloads are written to ``directory / filename``; an existing file at that
path is replaced once the new content is complete.
"""

from __future__ import annotations

import pathlib
from collections.abc import AsyncIterator

import aiofiles
import aiofiles.os

from .errors import FileAccessError


def target_path(directory: pathlib.Path | str, filename: str) -> pathlib.Path:
    """Validate *filename* and create *directory*, returning the absolute destination.

    Raises:
        FileAccessError: If filename is not a plain name or the directory cannot be created
    """
    name = pathlib.PurePath(filename)
    if not filename or name.name != filename or filename in (".", ".."):
        raise FileAccessError(f"Invalid filename: {filename!r} (must be a plain file name)")

    base = pathlib.Path(directory).expanduser().resolve()
    try:
        base.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileAccessError(f"Cannot create directory {base}: {e}") from e
    if not base.is_dir():
        raise FileAccessError(f"Not a directory: {base}")
    return base / filename


async def save_bytes(data: bytes, directory: pathlib.Path | str, filename: str) -> pathlib.Path:
    """Write *data* to ``directory/filename``, creating the directory if needed.

    Returns:
        Absolute path of the written file
    """
    file_path = target_path(directory, filename)
    async with aiofiles.open(file_path, "wb") as f:
        await f.write(data)
    return file_path


async def save_stream(chunks: AsyncIterator[bytes], file_path: pathlib.Path) -> pathlib.Path:
    """Write an async byte-chunk stream (e.g. a video download) to *file_path*.

    Chunks go to a ``.part`` sibling that replaces *file_path* only once the
    stream is exhausted; on failure the partial file is removed and any
    existing file is left as it was.

    Args:
        chunks: Async iterator of byte chunks
        file_path: Destination already checked by :func:`target_path`

    Returns:
        Absolute path of the written file
    """
    partial = file_path.with_name(f".{file_path.name}.part")
    try:
        async with aiofiles.open(partial, "wb") as f:
            async for chunk in chunks:
                await f.write(chunk)
    except BaseException:
        if await aiofiles.os.path.exists(partial):
            await aiofiles.os.remove(partial)
        raise
    await aiofiles.os.replace(partial, file_path)
    return file_path
