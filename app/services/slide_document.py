from __future__ import annotations

from typing import Sequence

from app.core.config import settings


FONT_STACK = "'Liberation Sans', Arial, 'Helvetica Neue', Helvetica, sans-serif"

# Rules for markup the slide editor already emits; geometry lives in _page_css().
_CONTENT_CSS = """
  .slide div {
    min-width: 0;
    position: absolute;
    box-sizing: border-box;
    padding: 0;
    overflow: hidden !important;
    page-break-inside: avoid !important;
    break-inside: avoid !important;
  }
  .slide img {
    width: 100%;
    height: auto;
    -webkit-user-drag: none;
    max-width: none;
    max-height: none;
    page-break-inside: avoid !important;
    break-inside: avoid !important;
    page-break-before: auto !important;
    break-before: auto !important;
    page-break-after: auto !important;
    break-after: auto !important;
    display: block;
    object-fit: contain;
  }
  .slide h1, .slide h2, .slide h3, .slide h4, .slide h5, .slide h6,
  .slide p, .slide span, .slide li, .slide div {
    font-family: 'Liberation Sans', Arial, 'Helvetica Neue', Helvetica, sans-serif;
  }
  .slide li::marker { color: #0095ff; }
  .slide p:first-child { margin-top: 0 !important; }
  .slide p:last-child { margin-bottom: 0 !important; }

  .slide ol, .slide ul {
    margin: 0;
    padding-left: 2em;
    list-style-position: outside;
  }
  .slide ol { list-style-type: decimal; }
  .slide ul { list-style-type: disc; }
  .slide ul ul { margin-left: 10px; list-style-type: circle; }
  .slide ul ul ul { margin-left: 10px; list-style-type: square; }
  .slide ul li:last-child,
  .slide ol li:last-child { margin-bottom: 0.6666667em !important; }

  .slide hr { border-top: 2px solid rgba(13, 13, 13, 0.1); margin: 1rem 0; }
  .slide br { margin: 0; }
  .slide a[href] { color: #0095ff; text-decoration: underline #0095ff; }
  .slide a:hover { color: #1c89d6; }

  div[data-type="title"] { line-height: 1.2; }
  div[data-type="title"] strong { display: block; }
  div[data-type="paragraph"] {
    overflow: visible;
    word-wrap: break-word;
    line-height: 1.6;
    padding: 0;
  }
  div[data-type="paragraph"] > span {
    display: block;
    width: 100%;
    height: 100%;
    box-sizing: border-box;
  }
  div[data-type="paragraph"] p { margin: 0 0 1em 0; }
  div[data-type="paragraph"] ul {
    margin: 0;
    padding-left: 2em;
    list-style-position: outside;
  }
  div[data-type="paragraph"] li { margin-bottom: 0.5em; line-height: 1.6; }
  div[data-type="image"] {
    display: block;
    page-break-inside: avoid !important;
    break-inside: avoid !important;
    page-break-before: auto !important;
    break-before: auto !important;
    page-break-after: auto !important;
    break-after: auto !important;
    overflow: hidden !important;
    contain: layout paint;
  }

  [style*="width"], [style*="height"] { box-sizing: border-box !important; }
  [style*="font-size: 20px"] { line-height: 1.6; letter-spacing: 0.01em; }

  .two-column > *,
  .two-column-content > div > * {
    width: 100%;
    overflow-wrap: break-word;
    column-count: 2;
  }

  text-wrapper-left::after,
  text-wrapper-right::after {
    content: "";
    display: table;
    clear: both;
    position: relative;
  }
  div:has(div > img):has(+ text-wrapper-left),
  img:has(+ text-wrapper-left) {
    float: left;
    margin-top: 0 !important;
    margin-right: 1rem;
    margin-bottom: 1rem;
  }
  div:has(div > img):has(+ text-wrapper-right),
  img:has(+ text-wrapper-right) {
    float: right;
    margin-top: 0 !important;
    margin-left: 1rem;
    margin-bottom: 1rem;
  }
"""


def _page_css(width: int, height: int, font_url: str) -> str:
    return f"""
  @font-face {{
    font-family: 'Liberation Sans';
    src: url('{font_url}') format('truetype');
  }}
  @page {{
    size: {width}px {height}px landscape;
    margin: 0;
  }}
  body {{
    margin: 0;
    padding: 0;
    width: {width}px;
    height: {height}px;
    font-family: {FONT_STACK};
  }}
  .slide {{
    font-family: {FONT_STACK};
    position: relative;
    background-color: #ffffff;
    width: {width}px;
    height: {height}px;
    margin: 0;
    page-break-after: always;
    break-after: page;
    page-break-inside: avoid !important;
    break-inside: avoid !important;
    overflow: hidden !important;
    display: block !important;
  }}
  .slide div {{ max-height: {height}px; }}
"""


def build_slides_html(
    slides: Sequence[str],
    width: int | None = None,
    height: int | None = None,
    font_url: str | None = None,
) -> str:
    """Assemble slide fragments into one printable HTML document.

    Each fragment becomes ``<div class="slide" id="slide-N">`` (N from 1, in
    input order) and starts its own printed page. Fragments are embedded as
    given; empty fragments still get a container.
    """
    if width is None:
        width = settings.SLIDE_WIDTH_PX
    if height is None:
        height = settings.SLIDE_HEIGHT_PX
    if font_url is None:
        font_url = settings.SLIDE_FONT_URL

    css = _page_css(width, height, font_url) + _CONTENT_CSS
    body = "".join(
        f'<div class="slide" id="slide-{i}" style="contain: layout size;">{fragment}</div>'
        for i, fragment in enumerate(slides, start=1)
    )
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<style>{css}</style>\n"
        "</head>\n"
        f"<body>{body}</body>\n"
        "</html>\n"
    )
