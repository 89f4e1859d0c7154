from __future__ import annotations

import re
from typing import Iterable, List


# <li><p><span style="...">TEXT</span></p></li> as emitted by the slide editor
_LI_P_SPAN_RE = re.compile(
    r"<li>\s*<p>\s*<span style=['\"]([^'\"]+)['\"]>(.*?)</span>\s*</p>\s*</li>"
)


def normalize_fragment(fragment: str) -> str:
    """Hoist the span style onto the list item and drop the p/span wrappers.

    Every occurrence is rewritten; anything else is returned untouched. TEXT
    does not span newlines, so wrapped variants are left as they are.
    """
    return _LI_P_SPAN_RE.sub(r'<li style="\1">\2</li>', fragment)


def normalize_slides(slides: Iterable[str]) -> List[str]:
    return [normalize_fragment(s) for s in slides]
