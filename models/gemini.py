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
"""Gemini calls for estimating room dimensions and placing furniture."""

import functools

from google import genai
from google.genai import types

from common.analytics import get_logger, track_model_call
from common.error_handling import EstimationError, GenerationError
from common.image_utils import encode_bytes_as_image, image_bytes_of, mime_type_of
from config.default import Default
from config.gemini_image_models import resolve_image_model
from models.room_vision import FALLBACK_DIMENSIONS, RoomDimensions

logger = get_logger(__name__)

ESTIMATION_PROMPT = """
Analyze this room image and estimate its dimensions (Length, Width, Height).
Assume standard ceiling heights (e.g., 8-10ft) if not obvious.
Look for visual cues like door frames, windows, and furniture sizes to estimate the floor area.

Return the result in JSON format with keys: length, width, height, unit.
Use 'ft' as the default unit.
Example: { "length": "12", "width": "10", "height": "9", "unit": "ft" }
"""

COMPOSITE_PROMPT = """
You are an expert interior design AI specialized in photorealistic image editing.

The first image provided is the ROOM.
The second image provided is the FURNITURE OBJECT.

Task:
Generate a realistic output image where the furniture object (Image 2) is placed naturally inside the room (Image 1).

Strict Requirements:
1. Perspective: The object must be aligned with the floor plane and perspective lines of the room.
2. Scale: Estimate the depth of the room and scale the object appropriately so it looks realistic. {dimension_context}
3. Lighting & Shadows: Analyze the light direction in the room. Generate realistic cast shadows and contact shadows for the object. Match the color temperature.
4. Object Fidelity: Do NOT change the design, color, or texture of the furniture object. Use the provided object exactly. Isolate it from its background if necessary.
5. Room Fidelity: Do NOT change the walls, existing furniture, or structure of the room. Only insert the new object.
6. Output Quality: High resolution, photorealistic, no artifacts.

{user_instruction}

Return only the generated image.
"""

DIMENSION_CONTEXT = (
    "Room Dimensions: {length}x{width}x{height} {unit}. "
    "Use these dimensions to ensure the object is scaled perfectly relative to the room volume."
)


def build_composite_prompt(
    instruction: str = "", dimensions: RoomDimensions | None = None
) -> str:
    """Composes the placement prompt from the fixed requirements."""
    dimension_context = ""
    if dimensions is not None:
        dimension_context = DIMENSION_CONTEXT.format(**dimensions.model_dump())

    user_instruction = ""
    if instruction and instruction.strip():
        user_instruction = f"Additional User Instruction: {instruction}"

    return COMPOSITE_PROMPT.format(
        dimension_context=dimension_context, user_instruction=user_instruction
    )


def _image_part(handle: str) -> types.Part:
    return types.Part.from_bytes(data=image_bytes_of(handle), mime_type=mime_type_of(handle))


def _first_inline_image(response) -> bytes | None:
    """Returns the bytes of the first inline image in the first candidate."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = candidates[0].content
    if content is None or not content.parts:
        return None
    for part in content.parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and inline_data.data:
            return inline_data.data
    return None


class RoomVisionClient:
    """Stateless wrapper around the two Gemini requests the page makes.

    Credentials are handed in at construction; the SDK client is created on
    first use so that a missing key fails the call, not application startup.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str = "gemini-2.5-flash-image",
        estimation_model_name: str = "gemini-2.5-flash-image",
        vertexai: bool = False,
        project: str | None = None,
        location: str | None = None,
        client: genai.Client | None = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.estimation_model_name = estimation_model_name
        self.vertexai = vertexai
        self.project = project
        self.location = location
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if self.vertexai:
                self._client = genai.Client(
                    vertexai=True, project=self.project, location=self.location
                )
            elif self.api_key:
                self._client = genai.Client(api_key=self.api_key)
            else:
                raise GenerationError("GEMINI_API_KEY is not configured.")
        return self._client

    def estimate_dimensions(self, room_image: str) -> RoomDimensions:
        """Asks the model for the room's length, width and height.

        Best effort: any failure is logged and the fixed fallback
        (12 x 12 x 9 ft) is returned instead of raising.
        """
        try:
            config = types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=RoomDimensions,
            )
            with track_model_call(
                self.estimation_model_name, operation="estimate_dimensions"
            ):
                response = self.client.models.generate_content(
                    model=self.estimation_model_name,
                    contents=[_image_part(room_image), ESTIMATION_PROMPT],
                    config=config,
                )
                if not response.text:
                    raise EstimationError("No response from model")
                dimensions = RoomDimensions.model_validate_json(response.text)
            logger.info(f"Estimated room dimensions: {dimensions.model_dump()}")
            return dimensions
        except Exception as e:
            logger.error(f"Error estimating dimensions: {e}")
            return FALLBACK_DIMENSIONS.model_copy()

    def generate_composite(
        self,
        room_image: str,
        furniture_image: str,
        instruction: str = "",
        dimensions: RoomDimensions | None = None,
    ) -> str:
        """Places the furniture into the room photo.

        Args:
            room_image: Data URL of the room photo.
            furniture_image: Data URL of the furniture photo.
            instruction: Optional free-text placement instruction.
            dimensions: Optional room size used to scale the object.

        Returns:
            The composite as a ``data:image/png;base64,...`` URL.

        Raises:
            GenerationError: For any failure, including a text-only response.
        """
        prompt = build_composite_prompt(instruction, dimensions)

        try:
            # Order matters: room, then furniture, then the instruction.
            contents = [_image_part(room_image), _image_part(furniture_image), prompt]
            with track_model_call(
                self.model_name,
                operation="generate_composite",
                has_dimensions=dimensions is not None,
                has_instruction=bool(instruction),
            ):
                response = self.client.models.generate_content(
                    model=self.model_name,
                    contents=contents,
                    config=types.GenerateContentConfig(
                        response_modalities=["IMAGE", "TEXT"],
                    ),
                )
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"Gemini API Error: {e}")
            raise GenerationError(f"Composite generation failed: {e}") from e

        image_data = _first_inline_image(response)
        if image_data is None:
            logger.error(
                "No image generated by the model. The model may have returned text instead of an image."
            )
            raise GenerationError("No image generated by the model.")

        return encode_bytes_as_image(image_data, "image/png")


@functools.lru_cache(maxsize=1)
def get_client() -> RoomVisionClient:
    """Process-wide client built once from the environment configuration."""
    cfg = Default()
    image_model = resolve_image_model(cfg.IMAGE_MODEL)
    logger.info(f"Using image model {image_model.model_name}")
    return RoomVisionClient(
        api_key=cfg.GEMINI_API_KEY,
        model_name=image_model.model_name,
        estimation_model_name=cfg.ESTIMATION_MODEL,
        vertexai=cfg.USE_VERTEXAI,
        project=cfg.PROJECT_ID,
        location=cfg.LOCATION,
    )
