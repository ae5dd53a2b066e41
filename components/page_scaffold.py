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


@me.content_component
def page_scaffold(page_name: str):
    """Outer page container."""
    with me.box(
        key=page_name,
        style=me.Style(
            display="flex",
            flex_direction="column",
            min_height="100vh",
            background=me.theme_var("background"),
        ),
    ):
        me.slot()


@me.content_component
def page_frame():
    """Centered content column below the header."""
    with me.box(
        style=me.Style(
            width="100%",
            max_width=1280,
            margin=me.Margin.symmetric(horizontal="auto"),
            padding=me.Padding.all(24),
        )
    ):
        me.slot()
