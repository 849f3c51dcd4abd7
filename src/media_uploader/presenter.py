"""Status presenter and the small view helpers around the drop zone."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from rich.console import RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.text import Text

from .models import ModelChoice, SelectedFile, Status, StatusKind

ICON_SPINNER = "spinner"
ICON_CHECK = "check"
ICON_WARNING = "warning"

CATEGORY_INFO = "info"
CATEGORY_SUCCESS = "success"
CATEGORY_ERROR = "error"

_VIEWS = {
    StatusKind.LOADING: (ICON_SPINNER, CATEGORY_INFO),
    StatusKind.SUCCESS: (ICON_CHECK, CATEGORY_SUCCESS),
    StatusKind.ERROR: (ICON_WARNING, CATEGORY_ERROR),
}

_STYLES = {
    CATEGORY_INFO: "blue",
    CATEGORY_SUCCESS: "green",
    CATEGORY_ERROR: "red",
}

_GLYPHS = {
    ICON_CHECK: "✔",
    ICON_WARNING: "!",
}


@dataclass(frozen=True)
class StatusView:
    icon: str
    category: str
    message: str

    @property
    def style(self) -> str:
        return _STYLES[self.category]


def present(status: Optional[Status]) -> Optional[StatusView]:
    """Return what the status banner shows, or ``None`` when it is hidden."""

    if status is None:
        return None
    icon, category = _VIEWS[status.kind]
    return StatusView(icon=icon, category=category, message=status.message)


def render(status: Optional[Status]) -> Optional[RenderableType]:
    view = present(status)
    if view is None:
        return None
    if view.icon == ICON_SPINNER:
        return Spinner("dots", text=Text(view.message, style=view.style))
    body = Text(f"{_GLYPHS[view.icon]} {view.message}", style=view.style)
    return Panel(body, border_style=view.style)


def submit_label(model: Union[str, ModelChoice]) -> str:
    return f"Analyse with {ModelChoice.parse(model).value.upper()}"


def file_caption(file: SelectedFile) -> str:
    return f"{file.name} ({file.size_label})"


__all__ = [
    "CATEGORY_ERROR",
    "CATEGORY_INFO",
    "CATEGORY_SUCCESS",
    "ICON_CHECK",
    "ICON_SPINNER",
    "ICON_WARNING",
    "StatusView",
    "file_caption",
    "present",
    "render",
    "submit_label",
]
