import re
from collections.abc import Sequence
from dataclasses import dataclass

from copy_as_markdown.models import Position, TextRange

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Line:
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def first_non_whitespace_index(self) -> int:
        return len(self.text) - len(self.text.lstrip(" \t"))


class Document:
    """Read-only view of a text buffer as lines, without their line breaks."""

    def __init__(self, lines: Sequence[str], eol: str = "\n") -> None:
        self._lines: tuple[str, ...] = tuple(lines) or ("",)
        self.eol = eol

    @classmethod
    def from_text(cls, text: str) -> "Document":
        match = _LINE_BREAK.search(text)
        eol = match.group(0) if match else "\n"
        return cls(_LINE_BREAK.split(text), eol)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_line_index(self) -> int:
        return len(self._lines) - 1

    def line_at(self, index: int) -> Line:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Line {index} is outside the document (0..{self.last_line_index}).")
        return Line(self._lines[index])

    def full_range(self) -> TextRange:
        last = self.last_line_index
        return TextRange.from_coordinates(0, 0, last, len(self._lines[last]))

    def validate_position(self, position: Position) -> Position:
        if position.line > self.last_line_index:
            last = self.last_line_index
            return Position(line=last, column=len(self._lines[last]))
        return Position(line=position.line, column=min(position.column, len(self._lines[position.line])))

    def validate_range(self, selection: TextRange) -> TextRange:
        """Clamp a range so both ends point inside the document."""
        return TextRange(start=self.validate_position(selection.start), end=self.validate_position(selection.end))

    def get_text(self, selection: TextRange | None = None) -> str:
        selection = self.validate_range(selection or self.full_range())
        start, end = selection.start, selection.end
        if start.line == end.line:
            return self._lines[start.line][start.column : end.column]
        parts = [self._lines[start.line][start.column :]]
        parts.extend(self._lines[start.line + 1 : end.line])
        parts.append(self._lines[end.line][: end.column])
        return self.eol.join(parts)
