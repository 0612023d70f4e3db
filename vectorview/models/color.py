"""Normalized RGBA color."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Red/green/blue in 0-255, alpha in 0-1 (alpha-last order)."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def black(cls) -> Color:
        return cls(red=0, green=0, blue=0, alpha=1.0)

    @classmethod
    def transparent(cls) -> Color:
        return cls(red=0, green=0, blue=0, alpha=0.0)

    @property
    def is_transparent_black(self) -> bool:
        return self.red == 0 and self.green == 0 and self.blue == 0 and self.alpha == 0.0

    def with_alpha(self, multiplier: float) -> Color:
        """Combine an opacity multiplier into the alpha channel."""
        alpha = min(1.0, max(0.0, self.alpha * multiplier))
        return self.model_copy(update={"alpha": alpha})

    def as_tuple(self) -> tuple[int, int, int, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self) -> str:
        """Alpha-last hex, e.g. ``#1FA1FFFF``."""
        a = round(self.alpha * 255)
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{a:02X}"

    def to_css(self) -> str:
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha:.3f})"
