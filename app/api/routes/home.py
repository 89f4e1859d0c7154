from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.services.response_formatter import format_index_page


router = APIRouter(tags=["home"])


@router.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(format_index_page())


@router.get("/api/health")
def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
