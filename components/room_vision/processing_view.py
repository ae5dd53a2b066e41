"""
Component showing the processing steps while a composite is generated.
"""

import mesop as me

from models.room_vision import StepStatus


def _step_style(status: str) -> me.Style:
    style = me.Style(
        display="flex",
        align_items="center",
        gap=16,
        padding=me.Padding.all(12),
        border_radius=8,
        border=me.Border.all(me.BorderSide(width=1, style="solid", color="transparent")),
    )
    if status == StepStatus.ACTIVE.value:
        style.background = me.theme_var("surface-container")
        style.border = me.Border.all(
            me.BorderSide(width=1, style="solid", color=me.theme_var("primary"))
        )
    return style


@me.component
def processing_view(steps: list[dict]):
    """
    Renders the step list. The steps are advanced by the page's event handler.
    """
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            gap=16,
            padding=me.Padding.all(32),
            border_radius=16,
            background=me.theme_var("surface-container-low"),
            min_width=420,
        )
    ):
        me.icon("psychology", style=me.Style(font_size=64, width=64, height=64, color=me.theme_var("primary")))
        me.text("Generating Scene", type="headline-5")

        with me.box(style=me.Style(display="flex", flex_direction="column", gap=12, width="100%")):
            for step in steps:
                status = step["status"]
                with me.box(key=step["id"], style=_step_style(status)):
                    if status == StepStatus.COMPLETED.value:
                        me.icon("check_circle", style=me.Style(color="green"))
                    elif status == StepStatus.ACTIVE.value:
                        me.progress_spinner(diameter=24)
                    else:
                        me.icon("radio_button_unchecked", style=me.Style(color=me.theme_var("outline")))
                    me.text(
                        step["label"],
                        style=me.Style(
                            color=me.theme_var("outline")
                            if status == StepStatus.PENDING.value
                            else me.theme_var("on-surface")
                        ),
                    )
