from pathlib import Path

from copy_as_markdown.core.file_info import get_file_info
from copy_as_markdown.core.languages import language_from_path
from copy_as_markdown.core.selection import EllipsisMarkers
from copy_as_markdown.core.text_files import is_text_file
from copy_as_markdown.models import FormatConfig

FENCE = "```"


def fence(tag: str, body: str) -> str:
    return f"{FENCE}{tag}\n{body}\n{FENCE}"


def _with_file_info(file_info: str, block: str, config: FormatConfig) -> str:
    return f"{file_info}\n{block}" if config.include_file_name else block


def format_selection(
    text: str,
    file_info: str,
    fence_tag: str,
    is_full: bool,
    config: FormatConfig,
    markers: EllipsisMarkers | None = None,
) -> str:
    """Wrap selected text in a fence block.

    Partial selections get ellipsis markers inside the fence and a colon after
    the file label.
    """
    if is_full or not config.add_ellipsis:
        return _with_file_info(file_info, fence(fence_tag, text), config)

    markers = markers or EllipsisMarkers("", "")
    top = f"{markers.top}\n" if markers.top else ""
    bottom = f"\n{markers.bottom}" if markers.bottom else ""
    prefix = f"{file_info}:\n" if config.include_file_name else ""
    return f"{prefix}{fence(fence_tag, top + text + bottom)}"


def format_file(
    file_path: str | Path,
    content: str,
    config: FormatConfig,
    workspace_root: Path | None = None,
) -> str | None:
    """Whole-file fence block, or None for files that are not text."""
    if not is_text_file(file_path, config):
        return None
    file_info = get_file_info(file_path, config, workspace_root)
    fence_tag = language_from_path(file_path, config.language_map)
    return _with_file_info(file_info, fence(fence_tag, content), config)
