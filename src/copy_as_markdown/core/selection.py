"""Selection analysis: full-document detection and omitted-content markers."""

from typing import NamedTuple

from copy_as_markdown.core.document import Document
from copy_as_markdown.core.i18n import Localizer
from copy_as_markdown.models import EllipsisInfo, TextRange

ELLIPSIS = "..."


class EllipsisMarkers(NamedTuple):
    top: str
    bottom: str


def is_full_selection(document: Document, selection: TextRange) -> bool:
    """True when the selection covers the whole document.

    Leading indentation on the first line may be left out of the selection.
    """
    first_line = document.line_at(0)
    last_index = document.last_line_index
    last_line = document.line_at(last_index)

    from_start = selection.start.line == 0 and selection.start.column <= first_line.first_non_whitespace_index
    to_end = selection.end.line == last_index and selection.end.column >= len(last_line.text)
    return from_start and to_end


def compute_ellipsis(document: Document, selection: TextRange) -> EllipsisInfo:
    """Find non-blank content outside the selection.

    Counts cover whole lines outside the boundary rows. Content sharing a
    boundary row with the selection sets the flag but is not counted.
    """
    start, end = selection.start, selection.end
    last_index = document.last_line_index

    above_count = 0
    has_above = False
    if start.line > 0:
        for index in range(start.line):
            if not document.line_at(index).is_blank:
                has_above = True
                above_count += 1
        if start.column > 0:
            before = document.line_at(start.line).text[: start.column]
            if before.strip():
                has_above = True

    below_count = 0
    has_below = False
    if end.line < last_index:
        for index in range(end.line + 1, last_index + 1):
            if not document.line_at(index).is_blank:
                has_below = True
                below_count += 1
    after = document.line_at(end.line).text[end.column :]
    if after.strip():
        has_below = True

    return EllipsisInfo(
        has_above=has_above,
        above_count=above_count,
        has_below=has_below,
        below_count=below_count,
    )


def _marker(present: bool, count: int, detailed: bool, direction: str, localizer: Localizer) -> str:
    if not present:
        return ""
    if detailed and count > 0:
        if count == 1:
            return localizer.translate(f"ellipsis.{direction}.line")
        return localizer.translate(f"ellipsis.{direction}.lines", count)
    return ELLIPSIS


def render_ellipsis(info: EllipsisInfo, detailed: bool, localizer: Localizer | None = None) -> EllipsisMarkers:
    localizer = localizer or Localizer()
    return EllipsisMarkers(
        top=_marker(info.has_above, info.above_count, detailed, "above", localizer),
        bottom=_marker(info.has_below, info.below_count, detailed, "below", localizer),
    )
