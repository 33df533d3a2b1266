import shutil
import subprocess
from pathlib import Path

import pytest

from copy_as_markdown.core.copy_files import copy_files
from copy_as_markdown.models import FormatConfig
from copy_as_markdown.workspace import GitWorkspace, get_git_repo_root

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _run_git(args: list[str], cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def test_get_git_repo_root_returns_top_level(tmp_path: Path) -> None:
    _run_git(["init"], tmp_path)
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert get_git_repo_root(nested) == Path(_run_git(["rev-parse", "--show-toplevel"], tmp_path))


def test_get_git_repo_root_outside_repository(tmp_path: Path) -> None:
    assert get_git_repo_root(tmp_path) is None


def test_git_workspace_labels_files_relative_to_repository(tmp_path: Path) -> None:
    _run_git(["init"], tmp_path)
    source = tmp_path / "src" / "app.py"
    source.parent.mkdir()
    source.write_text("print('hello')", encoding="utf-8")

    result = copy_files([source], FormatConfig(include_file_path=True), workspace=GitWorkspace())

    assert result.contents == ["src/app.py\n```python\nprint('hello')\n```"]
