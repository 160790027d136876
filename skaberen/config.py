"""Skaberen configuration.

Typed defaults for a scaffolding run. Settings use a Pydantic v2 model so they
can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Defaults and layout options for generated sources.

    Instances are typically created once by the CLI entry point and then
    handed to ``CrudGenerator``.
    """

    use_result_proc: bool = Field(
        default=False, description="Wrap service results in ResultadoProc by default"
    )
    use_util_class: bool = Field(
        default=True, description="Generate local utility classes when the result wrapper is used"
    )
    base_package: str = Field(
        default="",
        description="Java package prefix used when the target is not below a 'java' source root",
    )
    external_utils_package: str = Field(
        default="uft.utils",
        description="Package providing ResultadoProc/SearchPagination when local utilities are off",
    )
    template_dir: Optional[Path] = Field(
        default=None, description="Override for the bundled Jinja2 templates"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            SKABEREN_USE_RESULT_PROC, SKABEREN_USE_UTIL_CLASS,
            SKABEREN_BASE_PACKAGE, SKABEREN_EXTERNAL_UTILS_PACKAGE,
            SKABEREN_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SKABEREN_USE_RESULT_PROC"):
            kwargs["use_result_proc"] = _env_flag("SKABEREN_USE_RESULT_PROC")
        if os.environ.get("SKABEREN_USE_UTIL_CLASS"):
            kwargs["use_util_class"] = _env_flag("SKABEREN_USE_UTIL_CLASS")
        if os.environ.get("SKABEREN_BASE_PACKAGE"):
            kwargs["base_package"] = os.environ["SKABEREN_BASE_PACKAGE"]
        if os.environ.get("SKABEREN_EXTERNAL_UTILS_PACKAGE"):
            kwargs["external_utils_package"] = os.environ["SKABEREN_EXTERNAL_UTILS_PACKAGE"]
        if os.environ.get("SKABEREN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["SKABEREN_TEMPLATE_DIR"])
        return cls(**kwargs)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY
