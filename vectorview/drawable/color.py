"""Android color literal parsing.

Android writes colors alpha-first (``#AARRGGBB``); drawing surfaces want
alpha-last. Byte 0 is alpha, bytes 1-3 are R/G/B.
"""

from __future__ import annotations

import logging
import re

from vectorview.models.color import Color

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#([0-9a-fA-F]+)")


def parse_color(value: str | None) -> Color | None:
    """Parse an Android color attribute.

    Accepted: ``#RGB``, ``#ARGB``, ``#RRGGBB``, ``#AARRGGBB``.
    Absent values stay None. Present but unrecognized values (named colors,
    ``@color/...`` references, missing ``#``) resolve to opaque black.
    """
    if value is None:
        return None
    value = value.strip()
    m = _HEX_RE.fullmatch(value)
    if not m:
        logger.debug("Unrecognized color %r, using opaque black", value)
        return Color.black()

    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits = "FF" + digits
    if len(digits) != 8:
        logger.debug("Unsupported color length %r, using opaque black", value)
        return Color.black()

    a = int(digits[0:2], 16)
    r = int(digits[2:4], 16)
    g = int(digits[4:6], 16)
    b = int(digits[6:8], 16)
    return Color(red=r, green=g, blue=b, alpha=a / 255)
