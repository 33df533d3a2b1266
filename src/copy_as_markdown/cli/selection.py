from pathlib import Path
from typing import Annotated

import typer

from copy_as_markdown.cli.common import (
    AbsoluteOption,
    CopyOption,
    FilePathOption,
    SettingsOption,
    WorkspaceOption,
    build_config,
    deliver,
    fail,
    get_localizer,
    get_workspace,
)
from copy_as_markdown.core.copy_selection import copy_selection
from copy_as_markdown.core.document import Document
from copy_as_markdown.errors import NoSelectionError
from copy_as_markdown.models import Position, TextRange


def parse_position(value: str) -> Position:
    """Parse a 1-based ``LINE`` or ``LINE:COLUMN`` into a zero-based position."""
    line_text, _, column_text = value.partition(":")
    try:
        line = int(line_text)
        column = int(column_text) if column_text else 1
    except ValueError as exc:
        raise typer.BadParameter(f"Expected LINE or LINE:COLUMN, got '{value}'.") from exc
    if line < 1 or column < 1:
        raise typer.BadParameter("Lines and columns start at 1.")
    return Position(line=line - 1, column=column - 1)


def _resolve_range(document: Document, start: str | None, end: str | None) -> TextRange:
    full = document.full_range()
    start_position = parse_position(start) if start else full.start
    if end is None:
        end_position = full.end
    elif ":" in end:
        end_position = parse_position(end)
    else:
        line = min(parse_position(end).line, document.last_line_index)
        end_position = Position(line=line, column=len(document.line_at(line).text))
    if end_position.as_tuple() < start_position.as_tuple():
        raise typer.BadParameter("--end must not come before --start.")
    return TextRange(start=start_position, end=end_position)


def selection(
    path: Annotated[Path, typer.Argument(help="File to copy from.", exists=True, dir_okay=False, readable=True)],
    start: Annotated[str | None, typer.Option(help="Selection start as LINE[:COLUMN], 1-based.")] = None,
    end: Annotated[
        str | None,
        typer.Option(help="Selection end as LINE[:COLUMN], 1-based and exclusive; a bare LINE means its end."),
    ] = None,
    language: Annotated[str | None, typer.Option(help="Editor language id (e.g. python, shell, vue).")] = None,
    settings: SettingsOption = None,
    file_path: FilePathOption = None,
    absolute: AbsoluteOption = None,
    workspace: WorkspaceOption = None,
    ellipsis_detail: Annotated[
        bool | None,
        typer.Option("--ellipsis-detail/--no-ellipsis-detail", help="Say how many lines were omitted."),
    ] = None,
    ellipsis: Annotated[
        bool | None,
        typer.Option("--ellipsis/--no-ellipsis", help="Mark content left out above and below the selection."),
    ] = None,
    copy: CopyOption = True,
) -> None:
    """Copy part of a file as a Markdown code block."""
    localizer = get_localizer()
    config = build_config(
        settings,
        localizer,
        include_file_path=file_path,
        file_path_base=None if absolute is None else ("absolute" if absolute else "workspace"),
        add_ellipsis=ellipsis,
        add_ellipsis_detail=ellipsis_detail,
    )

    document = Document.from_text(path.read_bytes().decode("utf-8-sig", errors="replace"))
    text_range = _resolve_range(document, start, end)

    workspace_root = get_workspace(workspace).root_for(path) if config.include_file_path else None
    try:
        markdown = copy_selection(
            document,
            text_range,
            path,
            config,
            localizer,
            language_id=language,
            workspace_root=workspace_root,
        )
    except NoSelectionError:
        fail(localizer, key="message.noSelection")

    deliver(markdown, copy, localizer, localizer.translate("message.copySuccess"))
