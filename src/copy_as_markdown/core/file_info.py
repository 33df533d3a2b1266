from pathlib import Path

from copy_as_markdown.models import FormatConfig

UNTITLED = "untitled"


def get_file_info(file_path: str | Path, config: FormatConfig, workspace_root: Path | None = None) -> str:
    """Label written above a fence block: file name, workspace-relative or absolute path."""
    if not config.include_file_name:
        return ""

    path = Path(file_path)
    file_name = path.name or UNTITLED
    if not config.include_file_path:
        return file_name

    absolute = path.absolute()
    if config.file_path_base == "absolute":
        return str(absolute)

    if workspace_root is None:
        return file_name
    try:
        return path.resolve().relative_to(workspace_root.resolve()).as_posix()
    except ValueError:
        return str(absolute)
