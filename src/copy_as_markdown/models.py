from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    column: int = Field(ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.column)


class TextRange(BaseModel):
    """Half-open range in line-then-column order."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @model_validator(mode="after")
    def _check_order(self) -> "TextRange":
        if self.end.as_tuple() < self.start.as_tuple():
            raise ValueError("Range end must not come before its start.")
        return self

    @classmethod
    def from_coordinates(cls, start_line: int, start_column: int, end_line: int, end_column: int) -> "TextRange":
        return cls(
            start=Position(line=start_line, column=start_column),
            end=Position(line=end_line, column=end_column),
        )

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


FilePathBase = Literal["workspace", "absolute"]


class FormatConfig(BaseModel):
    """Formatting options, accepted by field name or by their camelCase setting name."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    include_file_name: bool = True
    include_file_path: bool = False
    file_path_base: FilePathBase = "workspace"
    language_map: dict[str, str] = Field(default_factory=dict)
    add_ellipsis: bool = True
    add_ellipsis_detail: bool = False
    custom_text_extensions: tuple[str, ...] = ()


class EllipsisInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_above: bool = False
    above_count: int = 0
    has_below: bool = False
    below_count: int = 0
