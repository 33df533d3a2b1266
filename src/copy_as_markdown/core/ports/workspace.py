from pathlib import Path
from typing import Protocol


class WorkspaceResolver(Protocol):
    def root_for(self, path: Path) -> Path | None: ...
