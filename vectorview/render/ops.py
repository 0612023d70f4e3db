"""Renderer-agnostic draw operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from vectorview.models.color import Color
from vectorview.models.scene import FillRule


@dataclass(frozen=True)
class ScaleOp:
    """Global viewport -> pixel scale, applied before any shape op.

    ``replay`` hands ``sx``/``sy`` to the surface's own scale transform.
    Surfaces without one (point plotters, hit testing against the output
    raster) project viewport coordinates themselves with ``map_points``.
    """

    sx: float
    sy: float

    @property
    def matrix(self) -> NDArray[np.float64]:
        """3x3 affine matrix for homogeneous (x, y, 1) points."""
        return np.diag([self.sx, self.sy, 1.0])

    def map_points(self, points: NDArray[np.float64] | list[tuple[float, float]]) -> NDArray[np.float64]:
        """Map Nx2 viewport coordinates to pixel coordinates."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.column_stack([pts, np.ones(len(pts))])
        return (homogeneous @ self.matrix.T)[:, :2]


@dataclass(frozen=True)
class FillOp:
    shape_index: int
    path_data: str
    # Parsed path from the interpreter, shared with the StrokeOp of the same shape
    geometry: Any
    color: Color
    fill_rule: FillRule


@dataclass(frozen=True)
class StrokeOp:
    shape_index: int
    path_data: str
    geometry: Any
    color: Color
    line_width: float


DrawOp = Union[ScaleOp, FillOp, StrokeOp]
