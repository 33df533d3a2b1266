import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from copy_as_markdown.config import get_language_tag, load_config
from copy_as_markdown.core.i18n import Localizer
from copy_as_markdown.core.ports.clipboard import ClipboardPort
from copy_as_markdown.core.ports.workspace import WorkspaceResolver
from copy_as_markdown.errors import ClipboardError, ConfigError
from copy_as_markdown.models import FormatConfig

err_console = Console(stderr=True)

SettingsOption = Annotated[
    Path | None,
    typer.Option("--settings", help="JSON settings file (defaults to $COPY_AS_MARKDOWN_SETTINGS)."),
]
FilePathOption = Annotated[
    bool | None,
    typer.Option("--file-path/--no-file-path", help="Label blocks with the file path instead of the name."),
]
AbsoluteOption = Annotated[
    bool | None,
    typer.Option("--absolute/--relative", help="Use absolute paths rather than workspace-relative ones."),
]
WorkspaceOption = Annotated[
    Path | None,
    typer.Option("--workspace", help="Workspace folder for relative paths (defaults to the git repository)."),
]
CopyOption = Annotated[
    bool,
    typer.Option("--copy/--print", help="Copy the result to the clipboard or print it to stdout."),
]


def configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("copy_as_markdown")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


def get_localizer() -> Localizer:
    return Localizer.for_language(get_language_tag())


def get_clipboard() -> ClipboardPort:
    from copy_as_markdown.clipboard import PyperclipClipboard

    return PyperclipClipboard()


def get_workspace(workspace: Path | None) -> WorkspaceResolver:
    from copy_as_markdown.workspace import FixedWorkspace, GitWorkspace

    if workspace is not None:
        return FixedWorkspace(workspace)
    return GitWorkspace()


def build_config(
    settings: Path | None,
    localizer: Localizer,
    **overrides: object,
) -> FormatConfig:
    try:
        return load_config(settings, **overrides)
    except ConfigError as exc:
        fail(localizer, str(exc))


def fail(localizer: Localizer, detail: str | None = None, key: str = "message.copyFailed") -> NoReturn:
    message = localizer.translate(key)
    if detail:
        message = f"{message}: {detail}"
    err_console.print(f"[red]{escape(message)}[/red]", highlight=False)
    raise typer.Exit(code=1)


def deliver(markdown: str, copy: bool, localizer: Localizer, success_message: str) -> None:
    """Send the result to the clipboard, or to stdout with ``--print``."""
    if not copy:
        typer.echo(markdown)
        return
    try:
        get_clipboard().write_text(markdown)
    except ClipboardError as exc:
        fail(localizer, str(exc))
    err_console.print(f"[green]{escape(success_message)}[/green]", highlight=False)
