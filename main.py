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

"""RoomVision application host: FastAPI serving the Mesop app."""

import logging
import os

import mesop as me
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.analytics import get_logger
from common.error_handling import UnknownHandlerIdFilter
from config.default import Default

# Registers the page with Mesop.
import pages.room_vision  # noqa: F401  pylint: disable=unused-import

logger = get_logger(__name__)

for handler in logging.getLogger().handlers:
    handler.addFilter(UnknownHandlerIdFilter())
logging.getLogger("mesop").addFilter(UnknownHandlerIdFilter())

app = FastAPI(title=Default().APP_NAME)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=Default().DEBUG_MODE)
    ),
)


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", "8080"))
    logger.info(f"Starting RoomVision on port {port}")
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
