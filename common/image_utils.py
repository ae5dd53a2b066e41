# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Helpers for images held as data URLs (``data:<mime>;base64,<payload>``)."""

from __future__ import annotations

import base64
import binascii
import io
import re
from typing import Any

from absl import logging
from PIL import Image, UnidentifiedImageError

from common.error_handling import DecodeError

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URL_PREFIX = re.compile(r"^data:(.+);base64,")


def encode_bytes_as_image(data: bytes, mime_type: str) -> str:
    """Wraps raw image bytes into a self-describing data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def encode_file_as_image(file: Any) -> str:
    """Reads an uploaded file and returns it as a data URL.

    Args:
        file: An uploaded file, e.g. ``me.UploadedFile``. It must expose
            ``mime_type`` and either ``getvalue()`` or ``read()``.

    Returns:
        The data URL for the file contents.

    Raises:
        DecodeError: If the file bytes could not be read.
    """
    try:
        if hasattr(file, "getvalue"):
            data = file.getvalue()
        else:
            data = file.read()
    except (OSError, ValueError, AttributeError) as e:
        raise DecodeError(f"Failed to read {getattr(file, 'name', 'file')}: {e}") from e

    if not isinstance(data, (bytes, bytearray)):
        raise DecodeError(
            f"Failed to read {getattr(file, 'name', 'file')}: expected bytes, got {type(data).__name__}"
        )
    return encode_bytes_as_image(bytes(data), file.mime_type or DEFAULT_MIME_TYPE)


def is_image(file: Any) -> bool:
    """True iff the file's declared content type is an image type."""
    mime_type = getattr(file, "mime_type", None) or ""
    return mime_type.startswith("image/")


def mime_type_of(handle: str) -> str:
    """Extracts the MIME type from a data URL.

    e.g. "data:image/png;base64,..." -> "image/png". Falls back to
    image/jpeg when the prefix is missing or malformed.
    """
    match = _DATA_URL_PREFIX.match(handle or "")
    return match.group(1) if match else DEFAULT_MIME_TYPE


def raw_payload_of(handle: str) -> str:
    """Strips the data URL prefix, returning the text after the first comma."""
    _, separator, payload = handle.partition(",")
    return payload if separator else handle


def image_bytes_of(handle: str) -> bytes:
    """Decodes the base64 payload of a data URL."""
    try:
        return base64.b64decode(raw_payload_of(handle))
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Image payload is not valid base64: {e}") from e


def image_resolution_of(handle: str) -> str:
    """Returns "<width>x<height>" for a data URL image, or "Unknown"."""
    if not handle:
        return "Unknown"
    try:
        with Image.open(io.BytesIO(image_bytes_of(handle))) as img:
            return f"{img.width}x{img.height}"
    except (DecodeError, UnidentifiedImageError, OSError) as e:
        logging.info(f"App: Error getting image resolution: {e}")
        return "Unknown"
