"""Replay draw ops onto a 2D drawing surface."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from vectorview.models.color import Color
from vectorview.models.scene import FillRule
from vectorview.render.ops import DrawOp, FillOp, ScaleOp, StrokeOp


class DrawingSurface(Protocol):
    """Minimal canvas-like surface: a transform stack plus solid fill/stroke."""

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def fill(self, geometry: Any, color: Color, fill_rule: FillRule) -> None: ...

    def stroke(self, geometry: Any, color: Color, line_width: float) -> None: ...


def replay(ops: Iterable[DrawOp], surface: DrawingSurface) -> None:
    """Apply ops in order, bracketed by save/restore so the scale does not leak."""
    surface.save()
    try:
        for op in ops:
            if isinstance(op, ScaleOp):
                surface.scale(op.sx, op.sy)
            elif isinstance(op, FillOp):
                surface.fill(op.geometry, op.color, op.fill_rule)
            elif isinstance(op, StrokeOp):
                surface.stroke(op.geometry, op.color, op.line_width)
            else:
                raise TypeError(f"Unknown draw op: {op!r}")
    finally:
        surface.restore()
