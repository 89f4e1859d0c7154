from __future__ import annotations

import base64
import html


def format_index_page() -> str:
    return """<!DOCTYPE html>
<html>
<head><title>Website Screenshot</title></head>
<body>
    <h1>Generate a Screenshot</h1>
    <form action="/screenshot" method="post" enctype="multipart/form-data">
        <input type="text" name="url" placeholder="https://example.com" required>
        <button type="submit">Generate Screenshot</button>
    </form>
    <hr>
    <h1>Generate Slides PDF</h1>
    <p>Send a POST request to /slides with JSON body containing "slides" array</p>
</body>
</html>
"""


def format_screenshot_page(url: str, png: bytes) -> str:
    """HTML result page with the screenshot inlined as a data URI."""
    encoded = base64.b64encode(png).decode("ascii")
    return f"""<!DOCTYPE html>
<html>
<head><title>Screenshot Result</title></head>
<body>
    <h1>Screenshot of {html.escape(url)}</h1>
    <img src="data:image/png;base64,{encoded}" style="max-width:100%;height:auto;">
    <br><a href="/">Back to form</a>
</body>
</html>
"""
