"""The uploader component: owns the state and reacts to user events."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Union

from .config import settings
from .errors import InvalidFileError, error_message
from .intake import DragEvent, DragTracker, first_file, validate_file
from .logging import get_logger
from .models import ModelChoice, SelectedFile, Status
from .preview import PreviewRenderer
from .submission import LOADING_MESSAGE, PredictionClient, describe_result

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class UploaderState:
    file: Optional[SelectedFile] = None
    preview: Optional[str] = None
    model: ModelChoice = ModelChoice.V1
    status: Optional[Status] = None
    uploading: bool = False
    drag_active: bool = False

    @property
    def submit_disabled(self) -> bool:
        return self.uploading

    @property
    def can_submit(self) -> bool:
        return self.preview is not None and not self.uploading


StateListener = Callable[[UploaderState], None]


class Uploader:
    """Select or drop an image, preview it, and submit it for analysis.

    Handlers are meant to run on a single asyncio event loop. ``select_file``
    and ``handle_drop`` schedule the preview encode and return immediately;
    ``handle_submit`` schedules ``submit`` the same way.
    """

    def __init__(
        self,
        client: Optional[PredictionClient] = None,
        model: Optional[Union[str, ModelChoice]] = None,
    ) -> None:
        self._client = client or PredictionClient()
        self._state = UploaderState(model=ModelChoice.parse(model or settings.default_model))
        self._drag = DragTracker()
        self._preview = PreviewRenderer(self._on_preview_ready)
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> UploaderState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every new state; returns an unsubscribe function."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    # File intake

    def select_file(self, file: SelectedFile) -> None:
        try:
            validate_file(file)
        except InvalidFileError as exc:
            LOGGER.info("Rejected file", file=file.name, mime_type=file.mime_type)
            self._update(status=Status.error(str(exc)))
            return

        # Scheduling raises without a running loop; state changes only after it.
        self._preview.render(file)
        LOGGER.info("Accepted file", file=file.name, mime_type=file.mime_type, size=file.size)
        self._update(file=file, preview=None, status=None)

    def handle_picker(self, files: Optional[Sequence[SelectedFile]]) -> None:
        file = first_file(files)
        if file is not None:
            self.select_file(file)

    def handle_drag(self, event: DragEvent) -> None:
        active = self._drag.handle(event)
        if active != self._state.drag_active:
            self._update(drag_active=active)

    def handle_drop(self, event: DragEvent) -> None:
        self.handle_drag(event)
        file = first_file(event.files)
        if file is not None:
            self.select_file(file)

    def _on_preview_ready(self, file: SelectedFile, data_url: str) -> None:
        LOGGER.debug("Preview ready", file=file.name)
        self._update(preview=data_url)

    async def wait_for_preview(self) -> Optional[str]:
        await self._preview.wait()
        return self._state.preview

    # Model selection

    def set_model(self, model: Union[str, ModelChoice]) -> None:
        self._update(model=ModelChoice.parse(model))

    # Submission

    def handle_submit(self) -> Optional[asyncio.Task]:
        """Form submit handler; returns the scheduled task or ``None`` if ignored.

        The submit control only exists once a preview is shown and is
        disabled while uploading.
        """

        if not self._state.can_submit:
            return None
        return asyncio.get_running_loop().create_task(self.submit())

    async def submit(self) -> None:
        file = self._state.file
        if file is None or self._state.uploading:
            return

        model = self._state.model
        LOGGER.info("Submitting file", file=file.name, model=model.value)
        self._update(uploading=True, status=Status.loading(LOADING_MESSAGE))
        try:
            result = await self._client.predict(file, model)
            self._update(status=describe_result(result))
        except Exception as exc:  # noqa: BLE001
            LOGGER.warning("Submission failed", file=file.name, error=str(exc), error_type=type(exc).__name__)
            self._update(status=Status.error(error_message(exc)))
        finally:
            self._update(uploading=False)


__all__ = ["StateListener", "Uploader", "UploaderState"]
