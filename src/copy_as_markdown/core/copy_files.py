import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from copy_as_markdown.core.formatter import format_file
from copy_as_markdown.core.i18n import Localizer
from copy_as_markdown.core.ports.workspace import WorkspaceResolver
from copy_as_markdown.core.text_files import is_text_file
from copy_as_markdown.models import FormatConfig

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


@dataclass
class FileCopyResult:
    contents: list[str] = field(default_factory=list)
    count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def markdown(self) -> str:
        return SEPARATOR.join(self.contents)

    def extend(self, other: "FileCopyResult") -> None:
        self.contents.extend(other.contents)
        self.count += other.count
        self.errors.extend(other.errors)


class _FileCopier:
    def __init__(self, config: FormatConfig, localizer: Localizer, workspace: WorkspaceResolver | None) -> None:
        self._config = config
        self._localizer = localizer
        self._workspace = workspace

    def process_file(self, path: Path, result: FileCopyResult) -> None:
        # Checked before reading so binary files are never opened.
        if not is_text_file(path, self._config):
            logger.info(self._localizer.translate("message.unsupportedFileType", path.name))
            return

        try:
            content = path.read_bytes().decode("utf-8", errors="replace")
        except OSError:
            logger.debug("Could not read %s", path, exc_info=True)
            result.errors.append(self._localizer.translate("message.fileReadError", path.name))
            return

        workspace_root = self._workspace.root_for(path) if self._workspace else None
        markdown = format_file(path, content, self._config, workspace_root)
        if markdown is not None:
            result.contents.append(markdown)
            result.count += 1

    def process_folder(self, path: Path) -> FileCopyResult:
        result = FileCopyResult()
        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError:
            logger.exception("Error processing folder %s", path)
            return result

        for entry in entries:
            try:
                if entry.is_symlink():
                    logger.debug("Skipping symbolic link %s", entry)
                    continue
                if entry.is_file():
                    self.process_file(entry, result)
                elif entry.is_dir():
                    result.extend(self.process_folder(entry))
            except OSError:
                logger.exception("Error processing %s", entry)
                continue
        return result


def copy_files(
    paths: Iterable[str | Path],
    config: FormatConfig,
    localizer: Localizer | None = None,
    workspace: WorkspaceResolver | None = None,
) -> FileCopyResult:
    """Format files and directory trees as fence blocks.

    Directories are walked depth-first in name order. Unreadable files and
    folders are skipped without aborting the rest of the run.
    """
    copier = _FileCopier(config, localizer or Localizer(), workspace)
    result = FileCopyResult()
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            result.extend(copier.process_folder(path))
        elif path.is_file():
            copier.process_file(path, result)
        else:
            logger.warning("Skipping %s: not a file or directory", path)
    logger.info("Formatted %d file(s)", result.count)
    return result
