from collections.abc import Iterable
from pathlib import Path

from copy_as_markdown.models import FormatConfig

_DEFAULT_TEXT_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".cs", ".cpp", ".cc", ".cxx", ".c", ".h", ".hpp",
        ".html", ".htm", ".css", ".scss", ".sass", ".less", ".json", ".xml", ".yaml", ".yml", ".md",
        ".sh", ".bash", ".zsh", ".ps1", ".sql", ".go", ".rs", ".php", ".rb", ".swift", ".kt",
        ".vue", ".svelte", ".toml", ".ini", ".cfg", ".conf", ".txt", ".log", ".env", ".gitignore",
        ".dockerfile", ".makefile", ".cmake", ".gradle", ".properties", ".bat", ".cmd",
    }
)  # fmt: skip

# Matched against the whole lowercased file name.
_SPECIAL_FILE_NAMES: frozenset[str] = frozenset({"dockerfile", "makefile", "cmakefile", "rakefile", "gemfile"})


def normalize_extension(extension: str) -> str:
    extension = extension if extension.startswith(".") else f".{extension}"
    return extension.lower()


def text_extensions(custom_extensions: Iterable[str] = ()) -> frozenset[str]:
    return _DEFAULT_TEXT_EXTENSIONS | {normalize_extension(ext) for ext in custom_extensions}


def is_text_file(file_path: str | Path, config: FormatConfig) -> bool:
    """Whether a file should be copied as text.

    Only files with an unrecognized extension are rejected; extensionless
    files are accepted.
    """
    path = Path(file_path)
    extension = path.suffix.lower()
    if extension in text_extensions(config.custom_text_extensions):
        return True
    if path.name.lower() in _SPECIAL_FILE_NAMES:
        return True
    return extension == ""
