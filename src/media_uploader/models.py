"""Data model for the uploader component."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MIME_TYPE = "application/octet-stream"
BYTES_PER_MB = 1048576


class ModelChoice(str, Enum):
    """Model versions offered by the prediction service."""

    V1 = "v1"
    V2 = "v2"

    @property
    def label(self) -> str:
        return f"Version {self.value[1:]}"

    @classmethod
    def parse(cls, value: Union[str, "ModelChoice"]) -> "ModelChoice":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(choice.value for choice in cls)
            raise ValueError(f"Unknown model version {value!r}; expected one of {choices}") from None


class StatusKind(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    """Status banner content. ``None`` stands for the idle state."""

    kind: StatusKind
    message: str

    @classmethod
    def loading(cls, message: str) -> "Status":
        return cls(StatusKind.LOADING, message)

    @classmethod
    def success(cls, message: str) -> "Status":
        return cls(StatusKind.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> "Status":
        return cls(StatusKind.ERROR, message)


@dataclass(frozen=True)
class SelectedFile:
    """A file chosen through the picker or dropped on the target."""

    name: str
    content: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def type_root(self) -> str:
        return self.mime_type.split("/")[0]

    @property
    def size_label(self) -> str:
        return f"{self.size / BYTES_PER_MB:.2f} MB"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SelectedFile":
        """Read ``path`` and guess its MIME type from the filename."""

        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, content=path.read_bytes(), mime_type=mime_type or DEFAULT_MIME_TYPE)


class PredictionResult(BaseModel):
    """JSON body returned by ``/api/predict``."""

    model_config = ConfigDict(extra="ignore")

    is_deepfake: bool
    confidence: float = Field(ge=0.0, le=1.0)

    @property
    def confidence_percent(self) -> str:
        return f"{self.confidence * 100:.1f}"


__all__ = [
    "BYTES_PER_MB",
    "DEFAULT_MIME_TYPE",
    "ModelChoice",
    "PredictionResult",
    "SelectedFile",
    "Status",
    "StatusKind",
]
