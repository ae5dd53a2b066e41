"""
Component for entering or estimating the room dimensions.
"""

from typing import Callable
import mesop as me


_FIELDS = [("length", "Length"), ("width", "Width"), ("height", "Height")]


@me.component
def room_dimensions_input(
    dimensions: dict,
    on_dimension_change: Callable,
    on_unit_change: Callable,
    on_auto_measure: Callable,
    is_measuring: bool,
    disabled: bool = False,
):
    """
    Controlled form over the room dimensions. Each field reports its change
    keyed by field name; the page builds the replacement value.
    """
    locked = disabled or is_measuring
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            gap=16,
            padding=me.Padding.all(24),
            border_radius=16,
            border=me.Border.all(
                me.BorderSide(width=1, style="solid", color=me.theme_var("outline-variant"))
            ),
            opacity=0.5 if disabled else 1,
        )
    ):
        with me.box(
            style=me.Style(
                display="flex", justify_content="space-between", align_items="center"
            )
        ):
            with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
                me.icon("straighten")
                me.text("Room Dimensions", type="headline-6")
            me.button_toggle(
                value=dimensions.get("unit", "ft"),
                buttons=[
                    me.ButtonToggleButton(label="FT", value="ft"),
                    me.ButtonToggleButton(label="M", value="m"),
                ],
                on_change=on_unit_change,
                disabled=locked,
            )

        with me.box(
            style=me.Style(display="grid", grid_template_columns="1fr 1fr 1fr", gap=16)
        ):
            for field_name, field_label in _FIELDS:
                me.input(
                    key=field_name,
                    label=f"{field_label} ({dimensions.get('unit', 'ft')})",
                    type="number",
                    value=dimensions.get(field_name, ""),
                    placeholder="0",
                    on_blur=on_dimension_change,
                    disabled=locked,
                    style=me.Style(width="100%"),
                )

        with me.content_button(
            on_click=on_auto_measure,
            type="stroked",
            disabled=locked,
            style=me.Style(width="100%"),
        ):
            with me.box(
                style=me.Style(
                    display="flex", align_items="center", justify_content="center", gap=8
                )
            ):
                if is_measuring:
                    me.progress_spinner(diameter=18)
                    me.text("Scanning Room Geometry...")
                else:
                    me.icon("document_scanner")
                    me.text("Auto-Measure with AI")

        me.text(
            "AI estimates dimensions based on standard ceiling heights and visual cues.",
            style=me.Style(
                font_size=12, text_align="center", color=me.theme_var("on-surface-variant")
            ),
        )
