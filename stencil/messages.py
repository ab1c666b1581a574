"""Localized message bundles.

Bundles are YAML mappings stored as ``messages_<locale>.yaml`` next to a
``messages.yaml`` fallback.  Code that needs localized strings receives a
:class:`MessageBundle` explicitly instead of looking one up globally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from stencil.errors import CommandExecutionError

RESOURCES_DIR = Path(__file__).parent / "resources"


class MessageBundle:
    """Read-only access to a mapping of message keys to strings or lists."""

    def __init__(self, messages: dict[str, Any]) -> None:
        self._messages = dict(messages)

    @classmethod
    def from_file(cls, path: str | Path) -> "MessageBundle":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise CommandExecutionError(f"Message bundle {path} must be a mapping")
        return cls(data)

    @classmethod
    def for_locale(cls, locale: str, directory: Optional[Path] = None) -> "MessageBundle":
        """Load the bundle for *locale*, falling back to ``messages.yaml``."""
        directory = directory or RESOURCES_DIR
        localized = directory / f"messages_{locale}.yaml"
        if localized.is_file():
            return cls.from_file(localized)
        return cls.from_file(directory / "messages.yaml")

    def get(self, key: str) -> str:
        """Return message *key* as a string.

        Raises:
            KeyError: If the bundle has no such key.
        """
        value = self._messages[key]
        if isinstance(value, list):
            return ",".join(str(v) for v in value)
        return str(value)

    def get_list(self, key: str) -> list[str]:
        """Return message *key* as a list.

        Comma-separated strings are split; YAML lists are returned as is.
        """
        value = self._messages[key]
        if isinstance(value, list):
            return [str(v) for v in value]
        return [part.strip() for part in str(value).split(",") if part.strip()]

    def __contains__(self, key: object) -> bool:
        return key in self._messages
