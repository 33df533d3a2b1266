"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from copy_as_markdown.core.document import Document
from copy_as_markdown.core.i18n import Localizer

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def five_line_document() -> Document:
    """Five non-blank lines, zero-indexed 0..4."""
    return Document.from_text("line zero\nline one\nline two\nline three\nline four")


@pytest.fixture
def localizer() -> Localizer:
    return Localizer("en")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's settings and locale out of tests."""
    monkeypatch.delenv("COPY_AS_MARKDOWN_SETTINGS", raising=False)
    monkeypatch.delenv("COPY_AS_MARKDOWN_LANG", raising=False)
    monkeypatch.setenv("LANG", "en_US.UTF-8")
