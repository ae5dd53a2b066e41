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

"""Data structures for the RoomVision feature."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel

from config.room_vision_config import PROCESSING_STEPS


class AppState(str, Enum):
    """Which view the page renders. Exactly one is active at a time."""

    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


class StepStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


class RoomDimensions(BaseModel):
    """Room size as typed by the user or estimated by the model.

    Values stay free text so partially filled forms round-trip unchanged.
    """

    length: str = ""
    width: str = ""
    height: str = ""
    unit: Literal["ft", "m"] = "ft"

    def is_usable(self) -> bool:
        """Length and width are both filled in."""
        return bool(self.length.strip() and self.width.strip())


FALLBACK_DIMENSIONS = RoomDimensions(length="12", width="12", height="9", unit="ft")


@dataclass
class ProcessingStep:
    id: str
    label: str
    status: StepStatus = StepStatus.PENDING

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "status": self.status.value}


def default_processing_steps() -> list[ProcessingStep]:
    """The fixed step sequence, all pending."""
    return [ProcessingStep(id=step_id, label=label) for step_id, label in PROCESSING_STEPS]
