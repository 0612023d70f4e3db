"""vectorview: Android vector drawable extraction and draw-op mapping."""

from vectorview.drawable.parser import extract_scene
from vectorview.logging_setup import configure_logging
from vectorview.models.color import Color
from vectorview.models.result import ErrorKind, ExtractionError, ExtractionResult
from vectorview.models.scene import FillRule, Scene, Shape
from vectorview.render.mapper import map_to_draw_ops
from vectorview.render.ops import DrawOp, FillOp, ScaleOp, StrokeOp
from vectorview.render.surface import DrawingSurface, replay

__all__ = [
    "extract_scene",
    "map_to_draw_ops",
    "replay",
    "configure_logging",
    "Color",
    "ErrorKind",
    "ExtractionError",
    "ExtractionResult",
    "FillRule",
    "Scene",
    "Shape",
    "DrawOp",
    "ScaleOp",
    "FillOp",
    "StrokeOp",
    "DrawingSurface",
]
