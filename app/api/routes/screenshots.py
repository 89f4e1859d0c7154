from __future__ import annotations

import logging

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import ValidationError

from app.api.schemas import ScreenshotRequest
from app.core.config import settings
from app.services.renderer import get_renderer
from app.services.response_formatter import format_screenshot_page


logger = logging.getLogger(__name__)
router = APIRouter(tags=["screenshots"])


@router.post("/screenshot")
async def create_screenshot(url: str = Form(default="")):
    try:
        req = ScreenshotRequest(url=url)
    except ValidationError:
        logger.info("Rejected screenshot url: %r", url)
        return PlainTextResponse("Invalid URL.", status_code=400)

    try:
        png = await get_renderer().capture_screenshot(req.url, settings.SCREENSHOT_TIMEOUT_MS)
    except Exception as e:
        logger.error("Screenshot of %s failed: %s", req.url, e, exc_info=True)
        return PlainTextResponse("Failed to generate screenshot.", status_code=500)

    return HTMLResponse(format_screenshot_page(req.url, png))
