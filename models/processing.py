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

"""Timed step animation shown while a composite is being generated.

The animation is cosmetic pacing. It does not measure the progress of the
model call, which runs on its own and is joined by the controller.
"""

import time
from typing import Callable, Iterator, Sequence

from common.analytics import get_logger
from models.room_vision import ProcessingStep, StepStatus, default_processing_steps

logger = get_logger(__name__)

STEP_INTERVAL_SECONDS = 1.2
COMPLETION_DELAY_SECONDS = 0.5


class ProcessingAnimation:
    """Advances a fixed step sequence pending -> active -> completed.

    Each tick completes the active step and activates the next one. The tick
    after the last step was activated completes it and stops the timer; after
    a short delay ``on_complete`` is called exactly once. ``cancel()`` stops
    everything and guarantees the callback never fires.
    """

    def __init__(
        self,
        steps: Sequence[ProcessingStep] | None = None,
        on_complete: Callable[[], None] | None = None,
        interval: float = STEP_INTERVAL_SECONDS,
        completion_delay: float = COMPLETION_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        source = steps if steps is not None else default_processing_steps()
        self.steps = [
            ProcessingStep(id=step.id, label=step.label) for step in source
        ]
        self._on_complete = on_complete
        self._interval = interval
        self._completion_delay = completion_delay
        self._sleep = sleep
        self._index = 0
        self._stopped = False
        self._cancelled = False
        self._completed = False

    @property
    def is_running(self) -> bool:
        return not (self._stopped or self._cancelled)

    @property
    def is_complete(self) -> bool:
        return self._completed

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def tick(self) -> bool:
        """Advances one step. Returns False once the timer has stopped."""
        if not self.is_running:
            return False

        step_index = self._index
        if 0 < step_index <= len(self.steps):
            self.steps[step_index - 1].status = StepStatus.COMPLETED
        if step_index < len(self.steps):
            self.steps[step_index].status = StepStatus.ACTIVE

        self._index += 1
        if self._index > len(self.steps):
            self._stopped = True
            return False
        return True

    def cancel(self) -> None:
        if not self._completed and not self._cancelled:
            logger.info(f"Processing animation cancelled at step {self._index}")
        self._cancelled = True

    def finish(self) -> None:
        """Fires the completion callback, at most once and never after cancel."""
        if self._cancelled or self._completed:
            return
        self._completed = True
        if self._on_complete:
            self._on_complete()

    def snapshot(self) -> list[dict]:
        return [step.to_dict() for step in self.steps]

    def run(self) -> Iterator[list[dict]]:
        """Drives the timer, yielding a step snapshot after every tick.

        Closing the generator before it finishes cancels the animation.
        """
        try:
            while self.is_running:
                self._sleep(self._interval)
                if self._cancelled:
                    return
                self.tick()
                yield self.snapshot()

            if self._cancelled:
                return
            self._sleep(self._completion_delay)
            self.finish()
            if self._completed:
                yield self.snapshot()
        finally:
            if not self._completed:
                self.cancel()
