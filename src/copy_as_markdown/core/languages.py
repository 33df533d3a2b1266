from collections.abc import Mapping
from pathlib import Path

_LANGUAGE_FENCE_TAGS = {
    "javascript": "javascript",
    "typescript": "typescript",
    "python": "python",
    "java": "java",
    "csharp": "csharp",
    "cpp": "cpp",
    "c": "c",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "json": "json",
    "xml": "xml",
    "yaml": "yaml",
    "markdown": "markdown",
    "shell": "bash",
    "powershell": "powershell",
    "sql": "sql",
    "go": "go",
    "rust": "rust",
    "php": "php",
    "ruby": "ruby",
    "swift": "swift",
    "kotlin": "kotlin",
    "vue": "html",
    "svelte": "html",
    "jsx": "javascript",
    "tsx": "typescript",
}

_EXTENSION_LANGUAGE_MAP = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".cs": "csharp",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".c": "c",
    ".h": "c",
    ".hpp": "cpp",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".scss": "scss",
    ".sass": "scss",
    ".less": "css",
    ".json": "json",
    ".xml": "xml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".md": "markdown",
    ".sh": "bash",
    ".bash": "bash",
    ".zsh": "bash",
    ".ps1": "powershell",
    ".sql": "sql",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".rb": "ruby",
    ".swift": "swift",
    ".kt": "kotlin",
    ".vue": "html",
    ".svelte": "html",
    ".toml": "toml",
    ".ini": "ini",
    ".cfg": "ini",
    ".conf": "ini",
}

PLAIN_TEXT_TAG = "text"


def language_from_id(language_id: str, overrides: Mapping[str, str] | None = None) -> str:
    """Fence tag for an editor language id; unknown ids pass through unchanged."""
    if overrides and overrides.get(language_id):
        return overrides[language_id]
    return _LANGUAGE_FENCE_TAGS.get(language_id) or language_id


def language_id_for_path(file_path: str | Path) -> str | None:
    return _EXTENSION_LANGUAGE_MAP.get(Path(file_path).suffix.lower())


def language_from_path(file_path: str | Path, overrides: Mapping[str, str] | None = None) -> str:
    """Fence tag for a file, keyed by extension.

    Overrides are looked up by the language the extension maps to, not by the
    extension itself.
    """
    language = language_id_for_path(file_path)
    if language is None:
        return PLAIN_TEXT_TAG
    if overrides and overrides.get(language):
        return overrides[language]
    return language
