"""Extracted vector drawable model.

A Scene is a pure function of the document text: frozen, compared by value,
and never mutated by the renderer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from vectorview.models.color import Color


class FillRule(str, Enum):
    NONZERO = "nonzero"
    EVENODD = "evenodd"


class Shape(BaseModel):
    """One ``<path>`` outline plus its fill/stroke styling."""

    model_config = ConfigDict(frozen=True)

    path_data: str = Field(min_length=1)
    fill_color: Color | None = None
    fill_alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    fill_rule: FillRule = FillRule.NONZERO
    stroke_color: Color | None = None
    stroke_width: float = 0.0
    stroke_alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def has_fill(self) -> bool:
        return self.fill_color is not None

    @property
    def has_stroke(self) -> bool:
        return self.stroke_color is not None and self.stroke_width > 0

    def resolved_fill(self) -> Color | None:
        """Fill color with ``fill_alpha`` folded into its alpha channel."""
        if self.fill_color is None:
            return None
        return self.fill_color.with_alpha(self.fill_alpha)

    def resolved_stroke(self) -> Color | None:
        if not self.has_stroke:
            return None
        return self.stroke_color.with_alpha(self.stroke_alpha)


class Scene(BaseModel):
    """Root result of extraction."""

    model_config = ConfigDict(frozen=True)

    intrinsic_width: float = 100.0
    intrinsic_height: float = 100.0
    viewport_width: float = Field(gt=0)
    viewport_height: float = Field(gt=0)
    # Render order: later shapes paint over earlier ones
    shapes: tuple[Shape, ...] = Field(min_length=1)
