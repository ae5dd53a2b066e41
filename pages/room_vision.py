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

"""RoomVision page."""

import uuid

import mesop as me

from common.analytics import log_page_view, log_ui_click, track_click
from components.header import header
from components.page_scaffold import page_frame, page_scaffold
from components.room_vision.image_uploader import image_uploader
from components.room_vision.processing_view import processing_view
from components.room_vision.result_view import result_view
from components.room_vision.room_dimensions_input import room_dimensions_input
from config.default import Default
from config.gemini_image_models import resolve_image_model
from config.room_vision_config import HEADER_FEATURES
from models.gemini import get_client
from models.room_vision import AppState
from state.room_vision_state import PageState
from state.state import SessionState
from workflows.room_vision import controller

PAGE_NAME = "room_vision"


def on_load(e: me.LoadEvent):
    """Tags the session for analytics."""
    session = me.state(SessionState)
    session.current_page = PAGE_NAME
    if not session.session_id:
        session.session_id = str(uuid.uuid4())
    log_page_view(PAGE_NAME, session.session_id)
    yield


@me.page(
    path="/",
    title="RoomVision AI",
    on_load=on_load,
    security_policy=me.SecurityPolicy(
        allowed_script_srcs=["https://cdn.jsdelivr.net"],
    ),
)
def room_vision_page():
    cfg = Default()
    with page_scaffold(page_name=PAGE_NAME):  # pylint: disable=E1129:not-context-manager
        header(
            cfg.APP_NAME,
            "chair",
            subtitle=f"Powered by {resolve_image_model(cfg.IMAGE_MODEL).display_name}",
            features=HEADER_FEATURES,
        )
        with page_frame():  # pylint: disable=E1129:not-context-manager
            page_content()


def page_content():
    state = me.state(PageState)

    if state.error_message:
        error_banner(state.error_message)

    if state.app_state in (AppState.IDLE.value, AppState.ERROR.value):
        input_section()
    elif state.app_state == AppState.PROCESSING.value:
        with me.box(
            style=me.Style(
                display="flex", align_items="center", justify_content="center", min_height="60vh"
            )
        ):
            processing_view(steps=state.processing_steps)
    elif state.app_state == AppState.COMPLETE.value and state.generated_image:
        result_view(
            generated_image=state.generated_image,
            room_image=state.room_image,
            furniture_image=state.furniture_image,
            on_reset=on_reset_click,
        )


@me.component
def error_banner(message: str):
    with me.box(
        style=me.Style(
            display="flex",
            align_items="center",
            gap=12,
            padding=me.Padding.all(16),
            margin=me.Margin(bottom=24),
            border_radius=8,
            background=me.theme_var("error-container"),
            color=me.theme_var("on-error-container"),
        )
    ):
        me.icon("error")
        me.text(message, style=me.Style(flex_grow=1))
        with me.content_button(type="icon", on_click=on_dismiss_error_click):
            me.icon("close")


def _section_title(number: int, title: str):
    with me.box(style=me.Style(display="flex", align_items="center", gap=8, margin=me.Margin(bottom=16))):
        me.text(
            str(number),
            style=me.Style(
                width=32,
                height=32,
                border_radius="50%",
                display="flex",
                align_items="center",
                justify_content="center",
                background=me.theme_var("surface-container-high"),
            ),
        )
        me.text(title, type="headline-6")


def input_section():
    state = me.state(PageState)
    with me.box(style=me.Style(display="grid", grid_template_columns="1fr 1fr", gap=32)):
        # Room image and dimensions
        with me.box(style=me.Style(display="flex", flex_direction="column", gap=24)):
            with me.box():
                _section_title(1, "Room Environment")
                image_uploader(
                    key=controller.ROOM,
                    label="Upload Room Photo",
                    description="Take a clear photo of where you want to place the object.",
                    image_src=state.room_image,
                    on_upload=on_upload_image,
                    on_remove=on_remove_image,
                    accept_camera=True,
                )
            room_dimensions_input(
                dimensions=state.room_dimensions,
                on_dimension_change=on_dimension_blur,
                on_unit_change=on_unit_change,
                on_auto_measure=on_auto_measure_click,
                is_measuring=state.is_measuring,
                disabled=not state.room_image,
            )

        # Furniture image
        with me.box():
            _section_title(2, "Object to Place")
            image_uploader(
                key=controller.FURNITURE,
                label="Upload Furniture Item",
                description="Upload an isolated image of the furniture. Clean backgrounds work best.",
                image_src=state.furniture_image,
                on_upload=on_upload_image,
                on_remove=on_remove_image,
            )

    # Controls
    with me.box(
        style=me.Style(
            display="flex",
            align_items="center",
            gap=24,
            margin=me.Margin(top=32),
            padding=me.Padding.all(24),
            border_radius=16,
            background=me.theme_var("surface-container-low"),
        )
    ):
        me.input(
            label="Instruction (Optional)",
            value=state.user_instruction,
            placeholder="e.g. Place it in the center, rotate slightly to the left...",
            on_blur=on_instruction_blur,
            style=me.Style(flex_grow=1),
        )
        with me.content_button(
            type="flat",
            on_click=on_generate_click,
            disabled=not controller.can_generate(state),
        ):
            with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
                me.icon("auto_fix_high")
                me.text("Generate")


# --- Event Handlers ---


def on_upload_image(e: me.UploadEvent):
    """Upload handler for both image slots, keyed by slot name."""
    state = me.state(PageState)
    slot = controller.slot_for_upload_key(e.key)
    if slot:
        controller.apply_upload(state, slot, e.files[0])
    yield


def on_remove_image(e: me.ClickEvent):
    state = me.state(PageState)
    controller.clear_image(state, e.key)
    yield


def on_dimension_blur(e: me.InputBlurEvent):
    state = me.state(PageState)
    controller.update_dimensions(state, **{e.key: e.value})
    yield


def on_unit_change(e: me.ButtonToggleChangeEvent):
    state = me.state(PageState)
    if e.value:
        controller.update_dimensions(state, unit=e.value)
    yield


def on_instruction_blur(e: me.InputBlurEvent):
    session = me.state(SessionState)
    log_ui_click(
        element_id="room_vision_instruction",
        page_name=session.current_page,
        session_id=session.session_id,
        extras={"value": e.value},
    )
    state = me.state(PageState)
    state.user_instruction = e.value


@track_click(element_id="room_vision_auto_measure_button")
def on_auto_measure_click(e: me.ClickEvent):
    """Estimates the room dimensions from the room photo."""
    state = me.state(PageState)
    yield from controller.run_auto_measure(state, get_client())


@track_click(element_id="room_vision_generate_button")
def on_generate_click(e: me.ClickEvent):
    """Runs the composite generation alongside the processing animation."""
    state = me.state(PageState)
    yield from controller.run_generation(state, get_client())


@track_click(element_id="room_vision_reset_button")
def on_reset_click(e: me.ClickEvent):
    state = me.state(PageState)
    controller.reset(state)
    yield


@track_click(element_id="room_vision_dismiss_error_button")
def on_dismiss_error_click(e: me.ClickEvent):
    state = me.state(PageState)
    controller.dismiss_error(state)
    yield
