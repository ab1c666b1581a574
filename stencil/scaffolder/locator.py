"""Resolution of template identifiers to template directories."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class TemplateLocator:
    """Finds template directories on a search path.

    An identifier that already names an existing directory is used as is;
    otherwise it is looked up under each search directory in order.
    """

    def __init__(self, search_dirs: Sequence[str | Path]) -> None:
        self.search_dirs = [Path(d).expanduser() for d in search_dirs]

    def find(self, identifier: str) -> Path:
        """Return the base directory of template *identifier*.

        The returned directory is not guaranteed to exist: when nothing
        matches, the candidate under the first search directory is returned
        so the caller can report the missing description file.
        """
        direct = Path(identifier).expanduser()
        if direct.is_dir():
            return direct

        candidates = [d / identifier for d in self.search_dirs]
        for candidate in candidates:
            if candidate.is_dir():
                return candidate
        return candidates[0] if candidates else direct

    def available(self) -> list[str]:
        """List template identifiers found on the search path, sorted."""
        names: set[str] = set()
        for directory in self.search_dirs:
            if directory.is_dir():
                names.update(p.name for p in directory.iterdir() if p.is_dir())
        return sorted(names)
