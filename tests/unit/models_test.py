"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from copy_as_markdown.models import EllipsisInfo, FormatConfig, Position, TextRange


class TestPositionModel:
    def test_creates_position_with_valid_data(self) -> None:
        pos = Position(line=0, column=5)
        assert pos.line == 0
        assert pos.column == 5

    def test_rejects_negative_values(self) -> None:
        with pytest.raises(ValidationError):
            Position(line=-1, column=0)

    def test_position_is_frozen(self) -> None:
        pos = Position(line=1, column=2)
        with pytest.raises(ValidationError):
            pos.line = 3  # type: ignore[misc]

    def test_position_serializes_to_dict(self) -> None:
        assert Position(line=10, column=20).model_dump() == {"line": 10, "column": 20}


class TestTextRangeModel:
    def test_from_coordinates(self) -> None:
        text_range = TextRange.from_coordinates(1, 2, 3, 4)
        assert text_range.start == Position(line=1, column=2)
        assert text_range.end == Position(line=3, column=4)

    def test_rejects_end_before_start(self) -> None:
        with pytest.raises(ValidationError):
            TextRange.from_coordinates(2, 0, 1, 5)

    def test_rejects_end_column_before_start_on_same_line(self) -> None:
        with pytest.raises(ValidationError):
            TextRange.from_coordinates(2, 4, 2, 3)

    def test_is_empty(self) -> None:
        assert TextRange.from_coordinates(1, 1, 1, 1).is_empty is True
        assert TextRange.from_coordinates(1, 1, 1, 2).is_empty is False


class TestFormatConfigModel:
    def test_defaults(self) -> None:
        config = FormatConfig()
        assert config.include_file_name is True
        assert config.include_file_path is False
        assert config.file_path_base == "workspace"
        assert config.language_map == {}
        assert config.add_ellipsis is True
        assert config.add_ellipsis_detail is False
        assert config.custom_text_extensions == ()

    def test_accepts_camel_case_setting_names(self) -> None:
        config = FormatConfig.model_validate(
            {
                "includeFileName": False,
                "includeFilePath": True,
                "filePathBase": "absolute",
                "languageMap": {"python": "py3"},
                "addEllipsis": False,
                "addEllipsisDetail": True,
                "customTextExtensions": ["proto", ".GRAPHQL"],
            }
        )
        assert config.include_file_name is False
        assert config.include_file_path is True
        assert config.file_path_base == "absolute"
        assert config.language_map == {"python": "py3"}
        assert config.add_ellipsis is False
        assert config.add_ellipsis_detail is True
        assert config.custom_text_extensions == ("proto", ".GRAPHQL")

    def test_accepts_field_names(self) -> None:
        config = FormatConfig(include_file_path=True)
        assert config.include_file_path is True

    def test_rejects_unknown_path_base(self) -> None:
        with pytest.raises(ValidationError):
            FormatConfig(file_path_base="home")  # type: ignore[arg-type]

    def test_ignores_unknown_keys(self) -> None:
        config = FormatConfig.model_validate({"somethingElse": 1})
        assert config == FormatConfig()

    def test_is_frozen(self) -> None:
        config = FormatConfig()
        with pytest.raises(ValidationError):
            config.add_ellipsis = False  # type: ignore[misc]


def test_ellipsis_info_defaults_to_nothing_omitted() -> None:
    info = EllipsisInfo()
    assert (info.has_above, info.above_count, info.has_below, info.below_count) == (False, 0, False, 0)
