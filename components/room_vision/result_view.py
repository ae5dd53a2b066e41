"""
Component for the generated composite and its source images.
"""

from typing import Callable
import mesop as me

from common.image_utils import image_resolution_of
from components.download_button.download_button import download_button
from config.room_vision_config import ANALYSIS_NOTES, DOWNLOAD_FILENAME


PANEL_STYLE = me.Style(
    display="flex",
    flex_direction="column",
    gap=12,
    padding=me.Padding.all(24),
    border_radius=16,
    background=me.theme_var("surface-container-low"),
)


@me.component
def result_view(
    generated_image: str,
    room_image: str,
    furniture_image: str,
    on_reset: Callable,
):
    """
    Component for the generated result, with Try Again and Download.
    """
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=32)):
        with me.box(
            style=me.Style(
                display="flex", justify_content="space-between", align_items="center"
            )
        ):
            me.text("Generated Result", type="headline-5")
            with me.box(style=me.Style(display="flex", gap=12, align_items="center")):
                with me.content_button(on_click=on_reset, type="stroked"):
                    with me.box(style=me.Style(display="flex", align_items="center", gap=4)):
                        me.icon("restart_alt")
                        me.text("Try Again")
                me.link(
                    key="maximize_result",
                    text="Maximize",
                    url=generated_image,
                    open_in_new_tab=True,
                    style=me.Style(
                        color=me.theme_var("primary"),
                        text_decoration="none",
                        font_weight="bold",
                    ),
                )
                download_button(
                    key="download_result",
                    data_url=generated_image,
                    filename=DOWNLOAD_FILENAME,
                )

        with me.box(
            style=me.Style(display="grid", grid_template_columns="2fr 1fr", gap=32)
        ):
            me.image(
                src=generated_image,
                style=me.Style(width="100%", height="auto", border_radius=16),
            )

            with me.box(style=me.Style(display="flex", flex_direction="column", gap=24)):
                with me.box(style=PANEL_STYLE):
                    me.text("Composition Details", type="headline-6")
                    me.text("ORIGINAL ROOM", style=me.Style(font_size=12, letter_spacing="0.1em"))
                    me.image(
                        src=room_image,
                        style=me.Style(width="100%", height=128, object_fit="cover", border_radius=8, opacity=0.8),
                    )
                    me.text("PLACED OBJECT", style=me.Style(font_size=12, letter_spacing="0.1em"))
                    me.image(
                        src=furniture_image,
                        style=me.Style(width="100%", height=128, object_fit="contain", border_radius=8),
                    )
                    me.text(f"Output resolution: {image_resolution_of(generated_image)}")

                with me.box(style=PANEL_STYLE):
                    me.text("AI Analysis", type="headline-6")
                    for note in ANALYSIS_NOTES:
                        with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
                            me.icon("check_circle", style=me.Style(color="green"))
                            me.text(note, style=me.Style(font_size=14))
