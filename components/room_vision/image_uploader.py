"""
Component for uploading a single image with a preview.
"""

from typing import Callable
import mesop as me

from config.room_vision_config import ACCEPTED_IMAGE_TYPES, CHANGE_UPLOAD_SUFFIX


IMAGE_PLACEHOLDER_STYLE = me.Style(
    height=256,
    width="100%",
    border=me.Border.all(
        me.BorderSide(width=2, style="dashed", color=me.theme_var("outline-variant")),
    ),
    border_radius=12,
    display="flex",
    align_items="center",
    justify_content="center",
    flex_direction="column",
    text_align="center",
    gap=8,
    padding=me.Padding.all(24),
)

PREVIEW_STYLE = me.Style(
    height=256,
    width="100%",
    border=me.Border.all(
        me.BorderSide(width=1, style="solid", color=me.theme_var("outline-variant")),
    ),
    border_radius=12,
    overflow="hidden",
)


@me.component
def image_uploader(
    key: str,
    label: str,
    description: str,
    image_src: str,
    on_upload: Callable,
    on_remove: Callable,
    accept_camera: bool = False,
):
    """
    Component for uploading one image. The owner keeps the image value.
    """
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=8, width="100%")):
        with me.box(
            style=me.Style(
                display="flex", justify_content="space-between", align_items="baseline"
            )
        ):
            me.text(label, style=me.Style(font_weight="bold"))
            if image_src:
                me.button("Remove", key=key, on_click=on_remove, type="stroked")

        if image_src:
            with me.box(style=PREVIEW_STYLE):
                me.image(
                    src=image_src,
                    style=me.Style(height="100%", width="100%", object_fit="contain"),
                )
            me.uploader(
                label="Change Image",
                key=f"{key}{CHANGE_UPLOAD_SUFFIX}",
                on_upload=on_upload,
                accepted_file_types=ACCEPTED_IMAGE_TYPES,
                type="flat",
            )
        else:
            with me.box(style=IMAGE_PLACEHOLDER_STYLE):
                me.icon("photo_camera" if accept_camera else "image")
                me.text("Click to upload", type="subtitle-1")
                me.text(description, style=me.Style(font_size=14, color=me.theme_var("on-surface-variant")))
                me.uploader(
                    label="Upload",
                    key=key,
                    on_upload=on_upload,
                    accepted_file_types=ACCEPTED_IMAGE_TYPES,
                    type="raised",
                )
