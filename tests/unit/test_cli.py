import httpx
import pytest
from typer.testing import CliRunner

from media_uploader import cli
from media_uploader.submission import PredictionClient

runner = CliRunner()


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "face.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 16)
    return path


@pytest.fixture
def serve(monkeypatch):
    """Route the CLI's prediction client to an in-process handler."""

    requests = []

    def _install(handler):
        def _record(request):
            requests.append(request)
            return handler(request)

        def _factory(base_url=None):
            return PredictionClient(base_url=base_url or "http://predict.test", transport=httpx.MockTransport(_record))

        monkeypatch.setattr(cli, "PredictionClient", _factory)
        return requests

    return _install


def test_analyse_real_image(serve, image_path):
    requests = serve(lambda request: httpx.Response(200, json={"is_deepfake": False, "confidence": 0.5}))

    result = runner.invoke(cli.app, ["analyse", str(image_path), "--model", "v2"])

    assert result.exit_code == 0, result.output
    assert "Looks real" in result.output
    assert "50.0" in result.output
    assert "face.png" in result.output
    assert "http://predict.test/api/predict" in result.output
    assert requests[0].url.params["model"] == "v2"


def test_analyse_deepfake_exits_non_zero(serve, image_path):
    serve(lambda request: httpx.Response(200, json={"is_deepfake": True, "confidence": 0.932}))

    result = runner.invoke(cli.app, ["analyse", str(image_path)])

    assert result.exit_code == 1
    assert "Deepfake detected" in result.output
    assert "93.2" in result.output


def test_analyse_server_error(serve, image_path):
    serve(lambda request: httpx.Response(503, text="down"))
    result = runner.invoke(cli.app, ["analyse", str(image_path)])
    assert result.exit_code == 1
    assert "Server error while analysing media" in result.output


def test_analyse_rejects_non_image_without_request(serve, tmp_path):
    requests = serve(lambda request: httpx.Response(200, json={"is_deepfake": False, "confidence": 0.5}))
    notes = tmp_path / "notes.txt"
    notes.write_text("hello")

    result = runner.invoke(cli.app, ["analyse", str(notes)])

    assert result.exit_code == 1
    assert "Please select an image file" in result.output
    assert requests == []


def test_analyse_show_preview(serve, image_path):
    serve(lambda request: httpx.Response(200, json={"is_deepfake": False, "confidence": 0.75}))
    result = runner.invoke(cli.app, ["analyse", str(image_path), "--show-preview"])
    assert result.exit_code == 0, result.output
    assert "data:image/png;base64," in result.output


def test_analyse_unknown_model(image_path):
    result = runner.invoke(cli.app, ["analyse", str(image_path), "--model", "v7"])
    assert result.exit_code == 2


def test_analyse_missing_file(tmp_path):
    result = runner.invoke(cli.app, ["analyse", str(tmp_path / "missing.png")])
    assert result.exit_code == 2
    assert "No such file" in result.output


def test_validate(image_path, tmp_path):
    ok = runner.invoke(cli.app, ["validate", str(image_path)])
    assert ok.exit_code == 0
    assert "Accepted" in ok.output

    clip = tmp_path / "clip.mp4"
    clip.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    bad = runner.invoke(cli.app, ["validate", str(clip)])
    assert bad.exit_code == 1
    assert "Please select an image file" in bad.output


def test_models_lists_versions():
    result = runner.invoke(cli.app, ["models"])
    assert result.exit_code == 0
    assert "Version 1" in result.output
    assert "Version 2" in result.output
