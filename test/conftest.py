# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shared fixtures for RoomVision tests."""

import io
import os
import sys

import pytest
from PIL import Image

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from common.image_utils import encode_bytes_as_image  # noqa: E402


class FakeUpload:
    """Stands in for me.UploadedFile."""

    def __init__(self, data: bytes, mime_type: str, name: str = "upload"):
        self._data = data
        self.mime_type = mime_type
        self.name = name

    def getvalue(self) -> bytes:
        return self._data


class BrokenUpload(FakeUpload):
    def getvalue(self) -> bytes:
        raise OSError("stream closed")


def _png_bytes(size=(4, 3), color=(200, 120, 40)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _png_bytes()


@pytest.fixture
def room_image() -> str:
    return encode_bytes_as_image(_png_bytes((8, 6)), "image/png")


@pytest.fixture
def furniture_image() -> str:
    return encode_bytes_as_image(_png_bytes((2, 2), (10, 10, 10)), "image/jpeg")


@pytest.fixture
def make_upload():
    return FakeUpload


@pytest.fixture
def broken_upload():
    return BrokenUpload(b"", "image/png", name="broken.png")


@pytest.fixture
def no_sleep():
    """A sleep replacement that records requested delays."""
    calls = []

    def _sleep(seconds):
        calls.append(seconds)

    _sleep.calls = calls
    return _sleep
