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

import mesop as me


@me.component
def header(title: str, icon: str, subtitle: str = "", features: list[str] | None = None):
    """Page header with the app name and optional feature badges."""
    with me.box(
        style=me.Style(
            display="flex",
            justify_content="space-between",
            align_items="center",
            padding=me.Padding.symmetric(vertical=12, horizontal=16),
            border=me.Border(
                bottom=me.BorderSide(
                    width=1, style="solid", color=me.theme_var("outline-variant")
                )
            ),
        )
    ):
        with me.box(style=me.Style(display="flex", align_items="center", gap=8)):
            me.icon(icon, style=me.Style(color=me.theme_var("primary")))
            with me.box():
                me.text(title, type="headline-5", style=me.Style(margin=me.Margin.all(0)))
                if subtitle:
                    me.text(subtitle, style=me.Style(font_size=12, color=me.theme_var("on-surface-variant")))
        if features:
            with me.box(style=me.Style(display="flex", gap=16)):
                for feature in features:
                    with me.box(style=me.Style(display="flex", align_items="center", gap=4)):
                        me.icon("auto_awesome", style=me.Style(font_size=16))
                        me.text(f"Feature: {feature}", style=me.Style(font_size=14))
