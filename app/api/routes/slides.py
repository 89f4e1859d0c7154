from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.api.schemas import ErrorResponse, SlidesRequest
from app.services.renderer import get_renderer
from app.services.slides_pdf import render_slides_pdf


logger = logging.getLogger(__name__)
router = APIRouter(tags=["slides"])

PDF_FILENAME = "ai_slides.pdf"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post("/slides")
async def create_slides_pdf(request: Request):
    """Render ``{"slides": [...]}`` to a PDF of the odd-numbered slides."""
    try:
        req = SlidesRequest.model_validate_json(await request.body())
    except (ValidationError, RecursionError) as e:
        # malformed or over-nested JSON surfaces as ValidationError
        logger.info("Rejected slides payload: %s", e)
        return _error(400, "No slides provided or invalid format")

    try:
        pdf = await render_slides_pdf(req.slides, get_renderer())
    except Exception as e:
        logger.error("Error generating PDF for %d slides: %s", len(req.slides), e, exc_info=True)
        return _error(500, "An error occurred while generating the PDF")

    headers = {"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'}
    return Response(content=pdf, media_type="application/pdf", headers=headers)
