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

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class GeminiImageModelConfig:
    """Configuration for a Gemini model that can composite images."""

    version_id: str  # Short ID for config (e.g., "2.5-flash")
    model_name: str  # Full API Model ID (e.g., "gemini-2.5-flash-image")
    display_name: str  # Shown in the page header

    # A composite needs the room and the furniture image in one request
    max_input_images: int


# Single source of truth
GEMINI_IMAGE_MODELS: List[GeminiImageModelConfig] = [
    GeminiImageModelConfig(
        version_id="2.5-flash",
        model_name="gemini-2.5-flash-image",
        display_name="Gemini 2.5 Flash",
        max_input_images=3,
    ),
    GeminiImageModelConfig(
        version_id="3.0-pro-preview",
        model_name="gemini-3-pro-image-preview",
        display_name="Gemini 3.0 Pro Preview",
        max_input_images=6,
    ),
]

DEFAULT_IMAGE_MODEL = GEMINI_IMAGE_MODELS[0]


def get_gemini_image_model_config(
    model_name_or_version: str,
) -> Optional[GeminiImageModelConfig]:
    """Finds config by either full model name or short version ID."""
    for model in GEMINI_IMAGE_MODELS:
        if (
            model.model_name == model_name_or_version
            or model.version_id == model_name_or_version
        ):
            return model
    return None


def resolve_image_model(model_name_or_version: str | None) -> GeminiImageModelConfig:
    """Returns the configured model, or the default when it is unknown or
    cannot take both input images."""
    model = get_gemini_image_model_config(model_name_or_version or "")
    if model is None or model.max_input_images < 2:
        return DEFAULT_IMAGE_MODEL
    return model
