"""stencil configuration.

Typed configuration built on Pydantic v2 models so it is validated at
construction time and can be serialised to/from JSON or read from
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TEMPLATES_DIR = Path("~/.stencil/templates")


class GeneratorConfig(BaseModel):
    """Global stencil configuration.

    Created once by the CLI entry point and passed to the parts that need it.
    """

    templates_dirs: list[Path] = Field(
        default_factory=lambda: [DEFAULT_TEMPLATES_DIR],
        description="Directories searched for template identifiers, in order",
    )
    output_dir: Path = Field(default=Path("."))
    description_file: str = Field(default="template.xml", min_length=1)
    locale: str = Field(default="en", min_length=1)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            STENCIL_TEMPLATES_DIRS (``os.pathsep`` separated),
            STENCIL_OUTPUT_DIR, STENCIL_LOCALE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STENCIL_TEMPLATES_DIRS"):
            kwargs["templates_dirs"] = [
                Path(p) for p in os.environ["STENCIL_TEMPLATES_DIRS"].split(os.pathsep) if p
            ]
        if os.environ.get("STENCIL_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["STENCIL_OUTPUT_DIR"])
        if os.environ.get("STENCIL_LOCALE"):
            kwargs["locale"] = os.environ["STENCIL_LOCALE"]
        return cls(**kwargs)
