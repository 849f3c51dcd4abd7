"""Preview renderer: encodes the selected file as a data URL in the background."""

from __future__ import annotations

import asyncio
import base64
from typing import Callable, Optional, Set

from .logging import get_logger
from .models import SelectedFile

LOGGER = get_logger(__name__)

PreviewCallback = Callable[[SelectedFile, str], None]


def encode_data_url(file: SelectedFile) -> str:
    payload = base64.b64encode(file.content).decode("ascii")
    return f"data:{file.mime_type};base64,{payload}"


class PreviewRenderer:
    """Schedules data URL encodes without blocking the caller.

    Each render gets a generation number. Only the completion belonging to the
    latest render reaches the callback; older ones are dropped, so a slow
    encode of a previous file can never replace the preview of the current one.
    """

    def __init__(self, on_ready: PreviewCallback) -> None:
        self._on_ready = on_ready
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def generation(self) -> int:
        return self._generation

    def render(self, file: SelectedFile) -> asyncio.Task:
        """Start encoding ``file``; must be called from the running event loop."""

        loop = asyncio.get_running_loop()
        self._generation += 1
        task = loop.create_task(self._encode(file, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _encode(self, file: SelectedFile, generation: int) -> Optional[str]:
        data_url = await asyncio.to_thread(encode_data_url, file)
        if generation != self._generation:
            LOGGER.debug("Discarding stale preview", file=file.name, generation=generation)
            return None
        self._on_ready(file, data_url)
        return data_url

    def pending(self) -> Set[asyncio.Task]:
        return set(self._tasks)

    async def wait(self) -> None:
        """Wait until every outstanding encode has finished."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks))


__all__ = ["PreviewRenderer", "encode_data_url"]
