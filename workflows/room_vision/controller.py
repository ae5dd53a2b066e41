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

"""View-state machine for the RoomVision page.

The functions here mutate a page state object (``state.room_vision_state.
PageState`` in the app, anything with the same attributes in tests) and hold
no state of their own.

A generation run moves IDLE -> PROCESSING and then waits on two independent
signals: the model result and the end of the processing animation. COMPLETE
is entered only when both have arrived for the current run, in either order.
A failure moves to ERROR straight away. Every run gets a fresh id so a late
result from an abandoned run is dropped instead of reviving a stale view.
"""

import concurrent.futures
import time
import uuid
from typing import Any, Callable, Iterator

from common.analytics import get_logger
from common.error_handling import DecodeError, GenerationError
from common.image_utils import encode_file_as_image, is_image
from config.default import Default
from config.room_vision_config import CHANGE_UPLOAD_SUFFIX, GENERATION_FAILED_MESSAGE
from models.processing import ProcessingAnimation
from models.room_vision import AppState, RoomDimensions, default_processing_steps

logger = get_logger(__name__)

ROOM = "room"
FURNITURE = "furniture"
_IMAGE_FIELDS = {ROOM: "room_image", FURNITURE: "furniture_image"}

# Model calls run here while the event handler drives the animation. Calls
# beyond GENERATION_WORKERS queue until a worker frees up.
_EXECUTOR = concurrent.futures.ThreadPoolExecutor(
    max_workers=Default().GENERATION_WORKERS, thread_name_prefix="room-vision"
)


def can_generate(state) -> bool:
    return bool(state.room_image and state.furniture_image)


def _is_current(state, run_id: str) -> bool:
    return (
        bool(run_id)
        and state.generation_id == run_id
        and state.app_state == AppState.PROCESSING.value
    )


def begin_generation(state) -> str | None:
    """Enters PROCESSING and returns the new run id, or None if not allowed."""
    if not can_generate(state):
        return None
    if state.app_state == AppState.PROCESSING.value:
        return None

    run_id = str(uuid.uuid4())
    state.app_state = AppState.PROCESSING.value
    state.generation_id = run_id
    state.is_animation_complete = False
    state.error_message = ""
    state.generated_image = ""
    state.processing_steps = [step.to_dict() for step in default_processing_steps()]
    logger.info(f"Generation {run_id} started")
    return run_id


def sync_completion(state) -> bool:
    """Moves PROCESSING -> COMPLETE once both completions are recorded."""
    if (
        state.app_state == AppState.PROCESSING.value
        and state.generated_image
        and state.is_animation_complete
    ):
        state.app_state = AppState.COMPLETE.value
        logger.info(f"Generation {state.generation_id} complete")
        return True
    return False


def record_generation_result(state, run_id: str, image: str) -> bool:
    """Stores the composite for the current run. Stale results are dropped."""
    if not _is_current(state, run_id):
        logger.info(f"Discarding result of stale generation {run_id}")
        return False
    state.generated_image = image
    sync_completion(state)
    return True


def record_animation_complete(state, run_id: str) -> bool:
    if not _is_current(state, run_id):
        return False
    state.is_animation_complete = True
    sync_completion(state)
    return True


def record_generation_failure(
    state, run_id: str, message: str = GENERATION_FAILED_MESSAGE
) -> bool:
    """PROCESSING -> ERROR, whatever the animation is doing."""
    if not _is_current(state, run_id):
        logger.info(f"Discarding failure of stale generation {run_id}")
        return False
    state.error_message = message
    state.app_state = AppState.ERROR.value
    return True


def reset(state) -> None:
    """Back to IDLE. Image selections and dimensions are kept."""
    state.app_state = AppState.IDLE.value
    state.generated_image = ""
    state.error_message = ""
    state.is_animation_complete = False
    state.generation_id = ""
    state.processing_steps = []


def dismiss_error(state) -> None:
    state.error_message = ""
    if state.app_state == AppState.ERROR.value:
        state.app_state = AppState.IDLE.value
        state.generation_id = ""


def dimensions_for_generation(state) -> RoomDimensions | None:
    """The room dimensions, if length and width are both filled in."""
    dimensions = RoomDimensions.model_validate(state.room_dimensions)
    return dimensions if dimensions.is_usable() else None


def update_dimensions(state, **changes: Any) -> RoomDimensions:
    """Replaces the stored dimensions with a copy carrying ``changes``."""
    dimensions = RoomDimensions.model_validate({**state.room_dimensions, **changes})
    state.room_dimensions = dimensions.model_dump()
    return dimensions


def slot_for_upload_key(key: str) -> str | None:
    """Maps an uploader key (``room``, ``room_change``, ...) to its image slot."""
    slot = key.removesuffix(CHANGE_UPLOAD_SUFFIX)
    return slot if slot in _IMAGE_FIELDS else None


def apply_upload(state, slot: str, file: Any) -> bool:
    """Stores an uploaded file as the room or furniture image.

    Non-image files are ignored. Unreadable files are logged and ignored.
    """
    if not is_image(file):
        logger.info(f"Ignoring non-image upload for {slot}: {getattr(file, 'mime_type', None)}")
        return False
    try:
        handle = encode_file_as_image(file)
    except DecodeError as e:
        # TODO: surface unreadable uploads in the page once there is a design for inline upload errors.
        logger.error(f"Error reading file: {e}")
        return False
    setattr(state, _IMAGE_FIELDS[slot], handle)
    return True


def clear_image(state, slot: str) -> None:
    setattr(state, _IMAGE_FIELDS[slot], "")


def _apply_outcome(state, run_id: str, future: concurrent.futures.Future) -> None:
    try:
        image = future.result()
    except GenerationError as e:
        logger.error(f"Generation {run_id} failed: {e.message}")
        record_generation_failure(state, run_id)
    except Exception as e:
        logger.exception(f"Generation {run_id} failed unexpectedly: {e}")
        record_generation_failure(state, run_id)
    else:
        record_generation_result(state, run_id, image)


def run_generation(
    state,
    client,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[None]:
    """Drives one generation run. Yields whenever the view should refresh.

    The model call runs on a worker thread. The animation runs here, and the
    call's future is checked after each tick so a failure ends the run
    without waiting for the animation.
    """
    run_id = begin_generation(state)
    if not run_id:
        return
    yield

    cfg = Default()
    logger.info(f"Submitting generation {run_id} ({cfg.GENERATION_WORKERS} workers)")
    future = _EXECUTOR.submit(
        client.generate_composite,
        state.room_image,
        state.furniture_image,
        state.user_instruction,
        dimensions_for_generation(state),
    )
    animation = ProcessingAnimation(
        on_complete=lambda: record_animation_complete(state, run_id),
        interval=cfg.PROCESSING_STEP_INTERVAL_SECONDS,
        completion_delay=cfg.PROCESSING_COMPLETION_DELAY_SECONDS,
        sleep=sleep,
    )

    outcome_applied = False
    try:
        for steps in animation.run():
            if state.generation_id != run_id:
                break
            state.processing_steps = steps
            if not outcome_applied and future.done():
                _apply_outcome(state, run_id, future)
                outcome_applied = True
            if not _is_current(state, run_id):
                break
            yield
    finally:
        animation.cancel()

    if not outcome_applied and _is_current(state, run_id):
        # Animation finished first; wait for the model.
        _apply_outcome(state, run_id, future)
    yield


def run_auto_measure(state, client) -> Iterator[None]:
    """Estimates room dimensions. Independent of the view-state machine."""
    if not state.room_image or state.is_measuring:
        return
    state.is_measuring = True
    yield

    try:
        dimensions = client.estimate_dimensions(state.room_image)
        state.room_dimensions = dimensions.model_dump()
    finally:
        state.is_measuring = False
        yield
