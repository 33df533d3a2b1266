import logging
from pathlib import Path

from copy_as_markdown.core.document import Document
from copy_as_markdown.core.file_info import get_file_info
from copy_as_markdown.core.formatter import format_selection
from copy_as_markdown.core.i18n import Localizer
from copy_as_markdown.core.languages import language_from_id, language_from_path
from copy_as_markdown.core.selection import compute_ellipsis, is_full_selection, render_ellipsis
from copy_as_markdown.errors import NoSelectionError
from copy_as_markdown.models import FormatConfig, TextRange

logger = logging.getLogger(__name__)


def copy_selection(
    document: Document,
    selection: TextRange,
    file_path: str | Path,
    config: FormatConfig,
    localizer: Localizer | None = None,
    language_id: str | None = None,
    workspace_root: Path | None = None,
) -> str:
    """Render a selection of a document as Markdown.

    The fence tag comes from ``language_id`` when given, otherwise from the
    file extension.
    """
    localizer = localizer or Localizer()
    selection = document.validate_range(selection)
    if selection.is_empty:
        raise NoSelectionError(localizer.translate("message.noSelection"))

    text = document.get_text(selection)
    file_info = get_file_info(file_path, config, workspace_root)
    if language_id:
        fence_tag = language_from_id(language_id, config.language_map)
    else:
        fence_tag = language_from_path(file_path, config.language_map)

    is_full = is_full_selection(document, selection)
    markers = None
    if not is_full and config.add_ellipsis:
        info = compute_ellipsis(document, selection)
        markers = render_ellipsis(info, config.add_ellipsis_detail, localizer)
        logger.debug(
            "Selection omits %d line(s) above and %d line(s) below",
            info.above_count,
            info.below_count,
        )

    return format_selection(text, file_info, fence_tag, is_full, config, markers)
