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

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Default:
    """Defaults class"""

    APP_NAME: str = os.environ.get("APP_NAME", "RoomVision AI")

    # Gemini Developer API
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")

    # Vertex AI, used instead of the API key when enabled
    USE_VERTEXAI: bool = _env_flag("USE_VERTEXAI")
    PROJECT_ID: str = os.environ.get("PROJECT_ID", "")
    LOCATION: str = os.environ.get("LOCATION", "us-central1")

    # Models
    IMAGE_MODEL: str = os.environ.get("IMAGE_MODEL", "2.5-flash")
    ESTIMATION_MODEL: str = os.environ.get(
        "ESTIMATION_MODEL", "gemini-2.5-flash-image"
    )

    # Processing view pacing, in seconds
    PROCESSING_STEP_INTERVAL_SECONDS: float = float(
        os.environ.get("PROCESSING_STEP_INTERVAL_SECONDS", "1.2")
    )
    PROCESSING_COMPLETION_DELAY_SECONDS: float = float(
        os.environ.get("PROCESSING_COMPLETION_DELAY_SECONDS", "0.5")
    )

    DEBUG_MODE: bool = _env_flag("DEBUG_MODE")

    # Worker threads for model calls, shared by every session
    GENERATION_WORKERS: int = int(os.environ.get("GENERATION_WORKERS", "4"))
