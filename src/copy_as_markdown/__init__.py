from copy_as_markdown.config import load_config
from copy_as_markdown.core.copy_files import FileCopyResult, copy_files
from copy_as_markdown.core.copy_selection import copy_selection
from copy_as_markdown.core.document import Document
from copy_as_markdown.core.formatter import format_file, format_selection
from copy_as_markdown.core.i18n import Localizer
from copy_as_markdown.models import EllipsisInfo, FormatConfig, Position, TextRange

__all__ = [
    "Document",
    "EllipsisInfo",
    "FileCopyResult",
    "FormatConfig",
    "Localizer",
    "Position",
    "TextRange",
    "copy_files",
    "copy_selection",
    "format_file",
    "format_selection",
    "load_config",
]
