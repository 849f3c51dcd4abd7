import asyncio
import base64
import time

import pytest

from media_uploader import preview as preview_module
from media_uploader.preview import PreviewRenderer, encode_data_url


def test_encode_data_url(png_file):
    data_url = encode_data_url(png_file)
    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]) == png_file.content


@pytest.mark.asyncio
async def test_render_does_not_block_caller(png_file):
    ready = []
    renderer = PreviewRenderer(lambda file, url: ready.append((file, url)))

    task = renderer.render(png_file)
    assert ready == []
    assert task in renderer.pending()

    await renderer.wait()
    assert ready == [(png_file, encode_data_url(png_file))]
    assert renderer.pending() == set()


@pytest.mark.asyncio
async def test_stale_preview_is_discarded(monkeypatch, png_file, jpeg_file):
    original = preview_module.encode_data_url

    def _slow_for_png(file):
        if file is png_file:
            time.sleep(0.2)
        return original(file)

    monkeypatch.setattr(preview_module, "encode_data_url", _slow_for_png)

    ready = []
    renderer = PreviewRenderer(lambda file, url: ready.append(file))
    first = renderer.render(png_file)
    second = renderer.render(jpeg_file)
    await renderer.wait()

    assert ready == [jpeg_file]
    assert first.result() is None
    assert second.result() == original(jpeg_file)
    assert renderer.generation == 2


def test_render_without_event_loop_keeps_generation(png_file):
    renderer = PreviewRenderer(lambda file, url: None)
    with pytest.raises(RuntimeError):
        renderer.render(png_file)
    assert renderer.generation == 0
    assert renderer.pending() == set()
