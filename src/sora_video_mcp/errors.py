# SPDX-License-Identifier: MIT
"""Exception types raised by the video tools.

Each class also derives from the builtin the rest of the code base would
raise for the same condition, so callers catching ``ValueError`` or
``RuntimeError`` keep working.
"""


class SoraToolError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(SoraToolError, RuntimeError):
    """Required configuration is missing or malformed. Fatal at startup."""


class FileAccessError(SoraToolError, ValueError):
    """A local file is missing, not a regular file, or unreadable."""


class InvalidSizeError(SoraToolError, ValueError):
    """A resolution string is not ``<width>x<height>`` with positive integers."""


ValidationError = InvalidSizeError


class TransformError(SoraToolError, ValueError):
    """Decoding, resizing or re-encoding a reference image failed."""


class RemoteServiceError(SoraToolError, RuntimeError):
    """The video API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str, prefix: str = "Sora API error") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"{prefix}: {status_code} - {body}")
