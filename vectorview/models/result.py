"""Extraction outcome: a Scene or a descriptive error, returned as data."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from vectorview.models.scene import Scene


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    MISSING_VIEWPORT = "missing_viewport"
    NO_PATHS_FOUND = "no_paths_found"
    UNEXPECTED_FAILURE = "unexpected_failure"


class ExtractionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str


class ExtractionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    scene: Scene | None = None
    error: ExtractionError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ExtractionResult:
        if (self.scene is None) == (self.error is None):
            raise ValueError("ExtractionResult needs exactly one of scene or error")
        return self

    @classmethod
    def ok(cls, scene: Scene) -> ExtractionResult:
        return cls(scene=scene)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> ExtractionResult:
        return cls(error=ExtractionError(kind=kind, message=message))

    @property
    def success(self) -> bool:
        return self.scene is not None
