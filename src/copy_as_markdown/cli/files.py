from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from copy_as_markdown.cli.common import (
    AbsoluteOption,
    CopyOption,
    FilePathOption,
    SettingsOption,
    WorkspaceOption,
    build_config,
    deliver,
    err_console,
    fail,
    get_localizer,
    get_workspace,
)
from copy_as_markdown.core.copy_files import copy_files


def files(
    paths: Annotated[list[Path] | None, typer.Argument(help="Files and directories to copy.", exists=True)] = None,
    extension: Annotated[
        list[str] | None,
        typer.Option("--extension", "-e", help="Extra extension to treat as text (repeatable)."),
    ] = None,
    settings: SettingsOption = None,
    file_path: FilePathOption = None,
    absolute: AbsoluteOption = None,
    workspace: WorkspaceOption = None,
    copy: CopyOption = True,
) -> None:
    """Copy files and folders as Markdown code blocks."""
    localizer = get_localizer()
    if not paths:
        fail(localizer, key="message.noFilesSelected")

    config = build_config(
        settings,
        localizer,
        include_file_path=file_path,
        file_path_base=None if absolute is None else ("absolute" if absolute else "workspace"),
    )
    if extension:
        config = config.model_copy(
            update={"custom_text_extensions": (*config.custom_text_extensions, *extension)},
        )

    resolver = get_workspace(workspace) if config.include_file_path else None
    result = copy_files(paths, config, localizer, resolver)

    for error in result.errors:
        err_console.print(f"[red]{escape(error)}[/red]", highlight=False)

    if not result.contents:
        err_console.print(f"[yellow]{localizer.translate('message.noFilesSelected')}[/yellow]", highlight=False)
        return

    deliver(result.markdown, copy, localizer, localizer.translate("message.copyFilesSuccess", result.count))
