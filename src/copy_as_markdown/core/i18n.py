"""Message tables and lookup for user-facing strings."""

import re
from dataclasses import dataclass

DEFAULT_LOCALE = "en"

_MESSAGES: dict[str, dict[str, str]] = {
    "zh-cn": {
        "message.noActiveEditor": "没有活动的编辑器",
        "message.noSelection": "请先选择要复制的内容",
        "message.copySuccess": "已复制为 Markdown 格式",
        "message.copyFailed": "复制失败",
        "message.noFilesSelected": "没有选择文件",
        "message.copyFilesSuccess": "已复制 {0} 个文件为 Markdown 格式",
        "message.fileReadError": "读取文件失败: {0}",
        "message.unsupportedFileType": "不支持的文件类型: {0}",
        "ellipsis.above.lines": "省略上方 {0} 行...",
        "ellipsis.below.lines": "省略下方 {0} 行...",
        "ellipsis.above.line": "省略上方 1 行...",
        "ellipsis.below.line": "省略下方 1 行...",
    },
    "en": {
        "message.noActiveEditor": "No active editor",
        "message.noSelection": "Please select content to copy first",
        "message.copySuccess": "Copied as Markdown format",
        "message.copyFailed": "Copy failed",
        "message.noFilesSelected": "No files selected",
        "message.copyFilesSuccess": "Copied {0} files as Markdown format",
        "message.fileReadError": "Failed to read file: {0}",
        "message.unsupportedFileType": "Unsupported file type: {0}",
        "ellipsis.above.lines": "Omitted {0} lines above...",
        "ellipsis.below.lines": "Omitted {0} lines below...",
        "ellipsis.above.line": "Omitted 1 line above...",
        "ellipsis.below.line": "Omitted 1 line below...",
    },
}

SUPPORTED_LOCALES = frozenset(_MESSAGES)

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def resolve_locale(language_tag: str | None) -> str:
    """Map a language tag such as ``zh-TW`` or ``en_US.UTF-8`` to a message table."""
    if language_tag and language_tag.strip().lower().startswith("zh"):
        return "zh-cn"
    return DEFAULT_LOCALE


@dataclass(frozen=True)
class Localizer:
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale '{self.locale}'. Supported: {sorted(SUPPORTED_LOCALES)}")

    @classmethod
    def for_language(cls, language_tag: str | None) -> "Localizer":
        return cls(resolve_locale(language_tag))

    def translate(self, key: str, *args: object) -> str:
        template = _MESSAGES[self.locale].get(key) or _MESSAGES[DEFAULT_LOCALE].get(key) or key

        def _substitute(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index < len(args):
                return str(args[index])
            return match.group(0)

        return _PLACEHOLDER.sub(_substitute, template)
