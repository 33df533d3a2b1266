import logging
import subprocess
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)


def get_git_repo_root(start_dir: Path) -> Path | None:
    try:
        result = subprocess.run(
            ["git", "-C", str(start_dir), "rev-parse", "--show-toplevel"],
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        logger.debug("git executable not found; no workspace root for %s", start_dir)
        return None
    if result.returncode != 0:
        return None
    root = result.stdout.strip()
    if not root:
        return None
    return Path(root)


class FixedWorkspace:
    """A single known workspace folder.

    Implements the ``WorkspaceResolver`` protocol.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).absolute()

    def root_for(self, path: Path) -> Path | None:
        return self._root


class GitWorkspace:
    """Use the enclosing git repository as the workspace folder.

    Implements the ``WorkspaceResolver`` protocol.
    """

    def root_for(self, path: Path) -> Path | None:
        resolved = path.resolve()
        start_dir = resolved if resolved.is_dir() else resolved.parent
        return _cached_repo_root(start_dir)


@lru_cache(maxsize=256)
def _cached_repo_root(start_dir: Path) -> Path | None:
    return get_git_repo_root(start_dir)
