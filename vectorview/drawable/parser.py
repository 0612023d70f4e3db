"""Vector drawable extractor: raw ``<vector>`` XML text -> Scene.

Attribute matching over per-``<path>`` text segments, not a DOM parse. The
format is narrow (one root, flat paths, optional ``<aapt:attr>`` gradients),
and segmenting the text keeps each path's child elements attached to it.
"""

from __future__ import annotations

import logging
import re

from vectorview.config import settings
from vectorview.drawable.color import parse_color
from vectorview.models.color import Color
from vectorview.models.result import ErrorKind, ExtractionResult
from vectorview.models.scene import FillRule, Scene, Shape

logger = logging.getLogger(__name__)

_PATH_OPEN_RE = re.compile(r"<path(?=[\s/>])")
# Numeric value with an optional unit suffix (dp, px, dip, ...)
_NUMBER_RE = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*[A-Za-z]*\s*")
# Quoted hex literal anywhere in a content block, e.g. android:color="#FF1FA1FF"
_COLOR_LITERAL_RE = re.compile(r"""(["'])\s*(#[0-9a-fA-F]{3,8})\s*\1""")

EMPTY_INPUT_MESSAGE = "Empty input"
MISSING_VIEWPORT_MESSAGE = "Could not find android:viewportWidth or android:viewportHeight attributes."
NO_PATHS_MESSAGE = "No <path> elements with android:pathData found."


class ExtractionFailure(Exception):
    """Raised inside extraction; converted to an ExtractionResult at the boundary."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def _attr_re(name: str) -> re.Pattern[str]:
    """Match ``[ns:]name = "value"`` with either quote style."""
    return re.compile(
        r"(?<![\w:.-])(?:[\w-]+:)?" + name + r"""\s*=\s*(["'])(.*?)\1""",
        re.DOTALL,
    )


def _ref_re(name: str) -> re.Pattern[str]:
    """Match an ``<aapt:attr name="android:<name>">`` style indirection."""
    return re.compile(r"""name\s*=\s*(["'])(?:[\w-]+:)?""" + name + r"\1")


_VIEWPORT_WIDTH_RE = _attr_re("viewportWidth")
_VIEWPORT_HEIGHT_RE = _attr_re("viewportHeight")
_WIDTH_RE = _attr_re("width")
_HEIGHT_RE = _attr_re("height")

_PATH_DATA_RE = _attr_re("pathData")
_FILL_COLOR_RE = _attr_re("fillColor")
_FILL_ALPHA_RE = _attr_re("fillAlpha")
_FILL_TYPE_RE = _attr_re("fillType")
_STROKE_COLOR_RE = _attr_re("strokeColor")
_STROKE_WIDTH_RE = _attr_re("strokeWidth")
_STROKE_ALPHA_RE = _attr_re("strokeAlpha")

_FILL_REF_RE = _ref_re("fillColor")
_STROKE_REF_RE = _ref_re("strokeColor")


def extract_scene(raw_text: str | None) -> ExtractionResult:
    """Extract a Scene from vector drawable text. Never raises."""
    try:
        scene = _extract(raw_text)
    except ExtractionFailure as e:
        logger.info("Extraction failed (%s): %s", e.kind.value, e.message)
        return ExtractionResult.fail(e.kind, e.message)
    except Exception as e:
        logger.warning("Unexpected extraction failure: %s", e)
        return ExtractionResult.fail(ErrorKind.UNEXPECTED_FAILURE, str(e) or "Unknown parsing error")
    return ExtractionResult.ok(scene)


def _extract(raw_text: str | None) -> Scene:
    if not raw_text or not raw_text.strip():
        raise ExtractionFailure(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    header, *segments = _PATH_OPEN_RE.split(raw_text)

    vp_w = _find(_VIEWPORT_WIDTH_RE, header)
    vp_h = _find(_VIEWPORT_HEIGHT_RE, header)
    if vp_w is None or vp_h is None:
        raise ExtractionFailure(ErrorKind.MISSING_VIEWPORT, MISSING_VIEWPORT_MESSAGE)

    width = _find(_WIDTH_RE, header)
    height = _find(_HEIGHT_RE, header)

    shapes: list[Shape] = []
    for i, segment in enumerate(segments):
        shape = _extract_shape(segment)
        if shape is None:
            logger.debug("Path #%d has no pathData, skipping", i)
            continue
        shapes.append(shape)

    if not shapes:
        raise ExtractionFailure(ErrorKind.NO_PATHS_FOUND, NO_PATHS_MESSAGE)

    scene = Scene(
        intrinsic_width=_parse_number(width) if width is not None else settings.default_intrinsic_size,
        intrinsic_height=_parse_number(height) if height is not None else settings.default_intrinsic_size,
        viewport_width=_parse_number(vp_w),
        viewport_height=_parse_number(vp_h),
        shapes=tuple(shapes),
    )
    logger.info(
        "Parsed vector: %d paths, viewport %g×%g",
        len(scene.shapes),
        scene.viewport_width,
        scene.viewport_height,
    )
    return scene


def _split_segment(segment: str) -> tuple[str, str]:
    """Split a ``<path`` segment into (attributes block, content block)."""
    end = segment.find(">")
    if end < 0:
        return segment, ""
    attrs = segment[:end].rstrip()
    if attrs.endswith("/"):
        attrs = attrs[:-1]
    return attrs, segment[end + 1:]


def _extract_shape(segment: str) -> Shape | None:
    attrs, content = _split_segment(segment)

    path_data = _find(_PATH_DATA_RE, attrs)
    if path_data is None or not path_data.strip():
        return None

    fill_color = parse_color(_find(_FILL_COLOR_RE, attrs))
    stroke_color = parse_color(_find(_STROKE_COLOR_RE, attrs))
    stroke_width = _number_or(_find(_STROKE_WIDTH_RE, attrs), 0.0)

    # Gradients are flattened to their first literal color
    if _needs_fallback(fill_color) and _FILL_REF_RE.search(content):
        fill_color = _first_literal_color(content) or fill_color
    if stroke_width > 0 and _needs_fallback(stroke_color) and _STROKE_REF_RE.search(content):
        stroke_color = _first_literal_color(content) or stroke_color

    fill_type = _find(_FILL_TYPE_RE, attrs)
    fill_rule = FillRule.EVENODD if fill_type and fill_type.strip().lower() == "evenodd" else FillRule.NONZERO

    return Shape(
        path_data=path_data,
        fill_color=fill_color,
        fill_alpha=_clamp_unit(_number_or(_find(_FILL_ALPHA_RE, attrs), 1.0)),
        fill_rule=fill_rule,
        stroke_color=stroke_color,
        stroke_width=stroke_width,
        stroke_alpha=_clamp_unit(_number_or(_find(_STROKE_ALPHA_RE, attrs), 1.0)),
    )


def _needs_fallback(color: Color | None) -> bool:
    return color is None or color.is_transparent_black


def _first_literal_color(content: str) -> Color | None:
    m = _COLOR_LITERAL_RE.search(content)
    if not m:
        return None
    return parse_color(m.group(2))


def _find(pattern: re.Pattern[str], text: str) -> str | None:
    m = pattern.search(text)
    return m.group(2) if m else None


def _parse_number(value: str) -> float:
    """Parse a numeric attribute, stripping a trailing unit suffix."""
    m = _NUMBER_RE.fullmatch(value)
    if not m:
        raise ValueError(f"Invalid numeric value: {value!r}")
    return float(m.group(1))


def _number_or(value: str | None, default: float) -> float:
    return default if value is None else _parse_number(value)


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))
