"""Terminal front end for the uploader."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.live import Live
from rich.table import Table

from . import presenter
from .config import settings
from .logging import configure_logging
from .models import ModelChoice, SelectedFile, StatusKind
from .submission import PredictionClient
from .uploader import Uploader, UploaderState

load_dotenv()

console = Console()
app = typer.Typer(help="Upload an image and ask the prediction service whether it is a deepfake.")


def _load_file(path: Path) -> SelectedFile:
    if not path.is_file():
        console.print(f"[red]No such file:[/red] {path}")
        raise typer.Exit(2)
    return SelectedFile.from_path(path)


def _parse_model(value: str) -> ModelChoice:
    try:
        return ModelChoice.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_preview_line(state: UploaderState, show_preview: bool) -> None:
    if state.file is None or state.preview is None:
        return
    console.print(f"[cyan]Preview:[/cyan] {presenter.file_caption(state.file)}")
    if show_preview:
        console.print(state.preview, soft_wrap=True, highlight=False)


async def _run_analysis(
    uploader: Uploader,
    file: SelectedFile,
    show_preview: bool,
) -> UploaderState:
    uploader.select_file(file)
    if uploader.state.file is not file:
        return uploader.state

    await uploader.wait_for_preview()
    _print_preview_line(uploader.state, show_preview)
    console.print(f"[dim]{presenter.submit_label(uploader.state.model)}[/dim]")

    with Live(console=console, transient=True) as live:

        def _on_change(state: UploaderState) -> None:
            renderable = presenter.render(state.status)
            if renderable is not None and state.uploading:
                live.update(renderable)

        unsubscribe = uploader.subscribe(_on_change)
        try:
            task = uploader.handle_submit()
            if task is not None:
                await task
        finally:
            unsubscribe()
    return uploader.state


def _finish(state: UploaderState) -> None:
    renderable = presenter.render(state.status)
    if renderable is not None:
        console.print(renderable)
    if state.status is not None and state.status.kind is StatusKind.ERROR:
        raise typer.Exit(1)


@app.command()
def analyse(
    path: Path = typer.Argument(..., help="Image to analyse"),
    model: str = typer.Option(settings.default_model.value, "--model", "-m", help="Model version (v1 or v2)"),
    api_base: Optional[str] = typer.Option(None, "--api-base", help="Prediction service base URL"),
    show_preview: bool = typer.Option(False, "--show-preview", help="Print the data URL preview"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override MEDIA_UPLOADER_LOG_LEVEL"),
) -> None:
    """Select an image, preview it and submit it for analysis.

    Examples:
        media-uploader analyse portrait.jpg
        media-uploader analyse portrait.jpg --model v2 --show-preview
    """
    if log_level:
        configure_logging(log_level, force=True)
    choice = _parse_model(model)
    file = _load_file(path)
    client = PredictionClient(base_url=api_base)
    console.print(f"[dim]Prediction service: {client.endpoint}[/dim]")
    uploader = Uploader(client=client, model=choice)
    state = asyncio.run(_run_analysis(uploader, file, show_preview))
    _finish(state)


@app.command()
def validate(path: Path = typer.Argument(..., help="File to check")) -> None:
    """Run file intake only and report whether the file would be accepted."""
    file = _load_file(path)

    async def _select() -> UploaderState:
        uploader = Uploader()
        uploader.select_file(file)
        await uploader.wait_for_preview()
        return uploader.state

    state = asyncio.run(_select())
    if state.status is None:
        console.print(f"[green]Accepted:[/green] {presenter.file_caption(file)} [dim]{file.mime_type}[/dim]")
        return
    _finish(state)


@app.command()
def models() -> None:
    """List the model versions the prediction service offers."""
    table = Table(title="Model versions")
    table.add_column("Value", style="cyan")
    table.add_column("Label")
    table.add_column("Default")
    for choice in ModelChoice:
        table.add_row(choice.value, choice.label, "yes" if choice is settings.default_model else "")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
