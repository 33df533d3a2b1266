"""Load formatting options from an editor-style JSON settings file."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from copy_as_markdown.errors import ConfigError
from copy_as_markdown.models import FormatConfig

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "COPY_AS_MARKDOWN_SETTINGS"
LANGUAGE_ENV_VAR = "COPY_AS_MARKDOWN_LANG"
SETTINGS_SECTION = "copyAsMarkdown"


def get_language_tag() -> str:
    return os.getenv(LANGUAGE_ENV_VAR) or os.getenv("LANG", "")


def _extract_section(raw: dict[str, Any]) -> dict[str, Any]:
    """Accept ``{"copyAsMarkdown": {...}}``, ``{"copyAsMarkdown.key": ...}`` or bare keys."""
    nested = raw.get(SETTINGS_SECTION)
    if isinstance(nested, dict):
        return dict(nested)
    prefix = f"{SETTINGS_SECTION}."
    dotted = {key[len(prefix) :]: value for key, value in raw.items() if key.startswith(prefix)}
    return dotted or raw


def load_config(path: str | Path | None = None, **overrides: Any) -> FormatConfig:
    """Build a ``FormatConfig`` from a settings file plus keyword overrides.

    ``path`` defaults to the ``COPY_AS_MARKDOWN_SETTINGS`` environment
    variable. ``None`` overrides are ignored so CLI options that were not
    given keep the file's value.
    """
    settings_path = path or os.getenv(SETTINGS_ENV_VAR)
    values: dict[str, Any] = {}
    if settings_path:
        settings_file = Path(settings_path)
        try:
            raw = json.loads(settings_file.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {settings_file}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in settings file {settings_file}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Settings file {settings_file} must contain a JSON object.")
        values = _extract_section(raw)
        logger.debug("Loaded %d setting(s) from %s", len(values), settings_file)

    try:
        config = FormatConfig.model_validate(values)
        updates = {key: value for key, value in overrides.items() if value is not None}
        if updates:
            config = FormatConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    return config
