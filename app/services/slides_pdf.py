from __future__ import annotations

from typing import Sequence

from app.core.config import settings
from app.services.renderer import PageRenderer, PrintOptions, Viewport
from app.services.slide_document import build_slides_html
from app.utils.html_normalizer import normalize_slides
from app.utils.page_selection import format_page_ranges, odd_pages


async def render_slides_pdf(slides: Sequence[str], renderer: PageRenderer) -> bytes:
    """Render slides to PDF keeping only the odd-numbered pages.

    Page filtering is done by the browser in the same export pass.
    """
    html = build_slides_html(normalize_slides(slides))
    width, height = settings.SLIDE_WIDTH_PX, settings.SLIDE_HEIGHT_PX
    viewport = Viewport(width=width, height=height, scale=settings.DEVICE_SCALE_FACTOR)
    options = PrintOptions(
        width=f"{width}px",
        height=f"{height}px",
        page_ranges=format_page_ranges(odd_pages(len(slides))),
    )
    return await renderer.render_to_pdf(html, viewport, options)
