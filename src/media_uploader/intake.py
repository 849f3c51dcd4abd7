"""File intake: MIME validation and drag-and-drop bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import InvalidFileError
from .models import SelectedFile

ACCEPT = "image/*"
ACCEPTED_TYPE_ROOT = "image"

DRAG_ENTER = "dragenter"
DRAG_OVER = "dragover"
DRAG_LEAVE = "dragleave"
DROP = "drop"

_ACTIVATING = {DRAG_ENTER, DRAG_OVER}
DRAG_EVENT_TYPES = (DRAG_ENTER, DRAG_OVER, DRAG_LEAVE, DROP)


def validate_file(file: SelectedFile) -> SelectedFile:
    """Return ``file`` if its top-level MIME type is ``image``."""

    if file.type_root != ACCEPTED_TYPE_ROOT:
        raise InvalidFileError()
    return file


def first_file(files: Optional[Sequence[SelectedFile]]) -> Optional[SelectedFile]:
    if not files:
        return None
    return files[0]


@dataclass
class DragEvent:
    """A drag-and-drop event delivered to the drop target.

    ``prevent_default`` stops the host from opening the dropped file itself.
    """

    type: str
    files: List[SelectedFile] = field(default_factory=list)
    default_prevented: bool = False
    propagation_stopped: bool = False

    def __post_init__(self) -> None:
        if self.type not in DRAG_EVENT_TYPES:
            raise ValueError(f"Unsupported drag event type: {self.type}")

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class DragTracker:
    """Tracks whether a drag is hovering over the drop target."""

    def __init__(self) -> None:
        self.active = False

    def handle(self, event: DragEvent) -> bool:
        event.prevent_default()
        event.stop_propagation()
        self.active = event.type in _ACTIVATING
        return self.active


__all__ = [
    "ACCEPT",
    "DRAG_ENTER",
    "DRAG_EVENT_TYPES",
    "DRAG_LEAVE",
    "DRAG_OVER",
    "DROP",
    "DragEvent",
    "DragTracker",
    "first_file",
    "validate_file",
]
