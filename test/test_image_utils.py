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

import base64

import pytest

from common.error_handling import DecodeError
from common.image_utils import (
    encode_file_as_image,
    image_bytes_of,
    image_resolution_of,
    is_image,
    mime_type_of,
    raw_payload_of,
)


@pytest.mark.parametrize("mime_type", ["image/png", "image/jpeg", "image/webp", "image/svg+xml"])
def test_encode_then_mime_type_recovers_declared_type(make_upload, png_bytes, mime_type):
    handle = encode_file_as_image(make_upload(png_bytes, mime_type))

    assert handle.startswith(f"data:{mime_type};base64,")
    assert mime_type_of(handle) == mime_type


def test_encode_keeps_bytes(make_upload, png_bytes):
    handle = encode_file_as_image(make_upload(png_bytes, "image/png"))

    assert image_bytes_of(handle) == png_bytes


def test_encode_raises_decode_error_when_read_fails(broken_upload):
    with pytest.raises(DecodeError):
        encode_file_as_image(broken_upload)


def test_is_image(make_upload):
    assert is_image(make_upload(b"", "image/heic"))
    assert not is_image(make_upload(b"", "application/pdf"))
    assert not is_image(make_upload(b"", ""))
    assert not is_image(make_upload(b"", None))


@pytest.mark.parametrize(
    "handle",
    ["", "iVBORw0KGgo", "data:image/png,abc", "data:;base64,abc", "image/png;base64,abc"],
)
def test_mime_type_falls_back_to_jpeg(handle):
    assert mime_type_of(handle) == "image/jpeg"


def test_raw_payload_is_text_after_first_comma():
    assert raw_payload_of("data:image/png;base64,AAAA") == "AAAA"
    assert raw_payload_of("data:text/plain,a,b") == "a,b"


def test_raw_payload_without_comma_is_unchanged():
    assert raw_payload_of("AAAA") == "AAAA"


def test_image_bytes_of_plain_base64():
    assert image_bytes_of(base64.b64encode(b"xyz").decode()) == b"xyz"


def test_image_resolution(room_image):
    assert image_resolution_of(room_image) == "8x6"


def test_image_resolution_unknown_for_non_image():
    handle = "data:image/png;base64," + base64.b64encode(b"not an image").decode()

    assert image_resolution_of(handle) == "Unknown"
    assert image_resolution_of("") == "Unknown"
