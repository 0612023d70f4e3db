"""Scene -> ordered draw operations at a square target size."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from svgpathtools import parse_path

from vectorview.config import settings
from vectorview.models.scene import Scene
from vectorview.render.ops import DrawOp, FillOp, ScaleOp, StrokeOp

logger = logging.getLogger(__name__)

PathInterpreter = Callable[[str], Any]


def map_to_draw_ops(
    scene: Scene,
    target_size: int | float | None = None,
    interpret: PathInterpreter = parse_path,
) -> list[DrawOp]:
    """Map a Scene to draw ops: one ScaleOp, then fill/stroke per shape.

    ``interpret`` turns path data into geometry. A shape whose path data it
    rejects is skipped; the rest of the scene still renders.
    """
    size = settings.preview_size if target_size is None else target_size
    if size <= 0:
        raise ValueError(f"target_size must be positive, got {size}")

    ops: list[DrawOp] = [
        ScaleOp(sx=size / scene.viewport_width, sy=size / scene.viewport_height),
    ]

    skipped = 0
    for i, shape in enumerate(scene.shapes):
        if not shape.has_fill and not shape.has_stroke:
            continue

        try:
            geometry = interpret(shape.path_data)
        except Exception as e:
            skipped += 1
            logger.warning("Failed to interpret path #%d (%s): %.60s", i, e, shape.path_data)
            continue

        if shape.has_fill:
            ops.append(FillOp(
                shape_index=i,
                path_data=shape.path_data,
                geometry=geometry,
                color=shape.resolved_fill(),
                fill_rule=shape.fill_rule,
            ))
        if shape.has_stroke:
            ops.append(StrokeOp(
                shape_index=i,
                path_data=shape.path_data,
                geometry=geometry,
                color=shape.resolved_stroke(),
                line_width=shape.stroke_width,
            ))

    logger.debug(
        "Mapped %d shapes to %d ops at %sx%s (%d skipped)",
        len(scene.shapes), len(ops), size, size, skipped,
    )
    return ops
