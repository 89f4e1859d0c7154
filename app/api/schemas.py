from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, StrictStr, field_validator


_URL_RE = re.compile(r"https?://[^\n\r\u2028\u2029]+")


class ScreenshotRequest(BaseModel):
    url: str

    @field_validator("url")
    @classmethod
    def _http_url(cls, v: str) -> str:
        if not _URL_RE.fullmatch(v):
            raise ValueError("url must start with http:// or https://")
        return v


class SlidesRequest(BaseModel):
    slides: List[StrictStr]

    @field_validator("slides")
    @classmethod
    def _not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("slides must not be empty")
        return v


class ErrorResponse(BaseModel):
    error: str
