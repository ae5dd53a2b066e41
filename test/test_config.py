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

import logging

from common.error_handling import UnknownHandlerIdFilter
from config.default import Default
from config.gemini_image_models import (
    DEFAULT_IMAGE_MODEL,
    get_gemini_image_model_config,
    resolve_image_model,
)
from config.room_vision_config import PROCESSING_STEPS
from workflows.room_vision import controller


def test_model_lookup_by_version_or_name():
    assert get_gemini_image_model_config("2.5-flash").model_name == "gemini-2.5-flash-image"
    assert get_gemini_image_model_config("gemini-3-pro-image-preview").version_id == "3.0-pro-preview"
    assert get_gemini_image_model_config("imagen-4") is None


def test_unknown_model_resolves_to_default():
    assert resolve_image_model("imagen-4") is DEFAULT_IMAGE_MODEL
    assert resolve_image_model(None) is DEFAULT_IMAGE_MODEL
    assert resolve_image_model("3.0-pro-preview").model_name == "gemini-3-pro-image-preview"


def test_six_processing_steps():
    assert len(PROCESSING_STEPS) == 6
    assert len({step_id for step_id, _ in PROCESSING_STEPS}) == 6


def test_unknown_handler_id_filter():
    log_filter = UnknownHandlerIdFilter()

    def record(message):
        return logging.LogRecord("mesop", logging.ERROR, __file__, 1, message, None, None)

    assert log_filter.filter(record("Unknown handler id: abc")) is False
    assert log_filter.filter(record("Something else")) is True


def test_generation_pool_is_sized_from_config():
    assert controller._EXECUTOR._max_workers == Default().GENERATION_WORKERS
