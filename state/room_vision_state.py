"""
State for the RoomVision page.
"""

from dataclasses import field
import mesop as me

from models.room_vision import AppState, RoomDimensions


@me.stateclass
class PageState:
    """State for the RoomVision page."""

    # pylint: disable=E3701:invalid-field-call

    app_state: str = AppState.IDLE.value

    # Data URLs, empty when absent
    room_image: str = ""
    furniture_image: str = ""
    generated_image: str = ""

    user_instruction: str = ""
    room_dimensions: dict = field(default_factory=lambda: RoomDimensions().model_dump())
    is_measuring: bool = False

    # Join flags for the current run
    generation_id: str = ""
    is_animation_complete: bool = False
    processing_steps: list[dict] = field(default_factory=list)

    error_message: str = ""
