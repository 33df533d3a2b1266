from pathlib import Path

from copy_as_markdown.core.text_files import is_text_file, normalize_extension, text_extensions
from copy_as_markdown.models import FormatConfig


class TestNormalizeExtension:
    def test_adds_dot(self) -> None:
        assert normalize_extension("proto") == ".proto"

    def test_lowercases(self) -> None:
        assert normalize_extension(".GraphQL") == ".graphql"


class TestIsTextFile:
    def test_known_extension(self) -> None:
        assert is_text_file("main.py", FormatConfig()) is True

    def test_extension_is_case_insensitive(self) -> None:
        assert is_text_file(Path("README.MD"), FormatConfig()) is True

    def test_binary_extension_is_rejected(self) -> None:
        assert is_text_file("logo.png", FormatConfig()) is False

    def test_makefile_without_extension(self) -> None:
        assert is_text_file("Makefile", FormatConfig()) is True

    def test_dockerfile_in_subdirectory(self) -> None:
        assert is_text_file("build/Dockerfile", FormatConfig()) is True

    def test_extensionless_file_is_text(self) -> None:
        assert is_text_file("README", FormatConfig()) is True

    def test_dotfile_is_extensionless(self) -> None:
        assert is_text_file(".gitignore", FormatConfig()) is True

    def test_custom_extension_without_dot(self) -> None:
        config = FormatConfig(custom_text_extensions=("proto",))
        assert is_text_file("api.proto", config) is True

    def test_custom_extension_is_normalized(self) -> None:
        config = FormatConfig(custom_text_extensions=(".GRAPHQL",))
        assert is_text_file("schema.graphql", config) is True

    def test_unlisted_extension_stays_rejected(self) -> None:
        config = FormatConfig(custom_text_extensions=("proto",))
        assert is_text_file("data.bin", config) is False


def test_text_extensions_merges_custom_entries() -> None:
    extensions = text_extensions(["Proto"])
    assert ".proto" in extensions
    assert ".py" in extensions
