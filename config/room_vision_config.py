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

"""Fixed UI constants for the RoomVision page."""

# (id, label) pairs shown by the processing view, in order.
PROCESSING_STEPS: list[tuple[str, str]] = [
    ("upload", "Analyzing images..."),
    ("depth", "Estimating room depth & geometry..."),
    ("segment", "Segmenting furniture object..."),
    ("perspective", "Calculating scale & perspective..."),
    ("lighting", "Matching lighting & shadows..."),
    ("render", "Final high-res rendering..."),
]

ACCEPTED_IMAGE_TYPES = [
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
    "image/heic",
]

DOWNLOAD_FILENAME = "room-vision-result.png"

# Key suffix of the uploader that replaces an image already in a slot.
CHANGE_UPLOAD_SUFFIX = "_change"

GENERATION_FAILED_MESSAGE = (
    "Failed to generate image. Please try again or check your API key."
)

ANALYSIS_NOTES = [
    "Perspective matched to floor plane",
    "Lighting temperature adapted",
    "Contact shadows generated",
]

HEADER_FEATURES = [
    "Smart Lighting Match",
    "Perspective Correction",
]
