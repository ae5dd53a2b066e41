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
from unittest.mock import MagicMock

from models.processing import ProcessingAnimation
from models.room_vision import StepStatus

ORDER = {"pending": 0, "active": 1, "completed": 2}


def _statuses(snapshot):
    return [step["status"] for step in snapshot]


def test_starts_all_pending():
    animation = ProcessingAnimation()

    assert len(animation.steps) == 6
    assert all(step.status == StepStatus.PENDING for step in animation.steps)
    assert [step.id for step in animation.steps] == [
        "upload", "depth", "segment", "perspective", "lighting", "render",
    ]


def test_steps_advance_in_order_without_regression(no_sleep):
    on_complete = MagicMock()
    animation = ProcessingAnimation(on_complete=on_complete, sleep=no_sleep)

    snapshots = list(animation.run())

    previous = _statuses(snapshots[0])
    for snapshot in snapshots[1:]:
        current = _statuses(snapshot)
        assert all(ORDER[c] >= ORDER[p] for p, c in zip(previous, current))
        previous = current

    # One active step at a time, moving left to right
    for tick, snapshot in enumerate(snapshots[:6]):
        statuses = _statuses(snapshot)
        assert statuses[tick] == "active"
        assert statuses[:tick] == ["completed"] * tick
        assert statuses[tick + 1:] == ["pending"] * (5 - tick)

    assert _statuses(snapshots[-1]) == ["completed"] * 6


def test_callback_fires_once_after_all_completed(no_sleep):
    seen = []
    animation = None

    def on_complete():
        seen.append(_statuses(animation.snapshot()))

    animation = ProcessingAnimation(on_complete=on_complete, sleep=no_sleep)
    list(animation.run())
    animation.finish()

    assert seen == [["completed"] * 6]
    assert animation.is_complete


def test_timing_uses_interval_then_completion_delay(no_sleep):
    animation = ProcessingAnimation(sleep=no_sleep)

    list(animation.run())

    assert no_sleep.calls == [1.2] * 7 + [0.5]


def test_tick_stops_after_last_step_completes():
    animation = ProcessingAnimation()

    results = [animation.tick() for _ in range(7)]

    assert results == [True] * 6 + [False]
    assert not animation.is_running
    assert animation.tick() is False
    assert [step.status for step in animation.steps] == [StepStatus.COMPLETED] * 6


def test_cancel_prevents_callback(no_sleep):
    on_complete = MagicMock()
    animation = ProcessingAnimation(on_complete=on_complete, sleep=no_sleep)

    runner = animation.run()
    next(runner)
    next(runner)
    animation.cancel()

    assert list(runner) == []
    animation.finish()
    on_complete.assert_not_called()
    assert animation.is_cancelled


def test_closing_the_runner_cancels(no_sleep):
    on_complete = MagicMock()
    animation = ProcessingAnimation(on_complete=on_complete, sleep=no_sleep)

    runner = animation.run()
    next(runner)
    runner.close()

    assert animation.is_cancelled
    animation.finish()
    on_complete.assert_not_called()


def test_cancel_logs_the_step_once(no_sleep, caplog):
    animation = ProcessingAnimation(sleep=no_sleep)
    runner = animation.run()
    next(runner)
    next(runner)

    with caplog.at_level(logging.INFO, logger="models.processing"):
        animation.cancel()
        animation.cancel()

    messages = [r.getMessage() for r in caplog.records if r.name == "models.processing"]
    assert messages == ["Processing animation cancelled at step 2"]
