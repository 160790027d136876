"""Jinja2 template rendering for Java artifacts.

Provides the TemplateRenderer class which loads the ``*.java.j2`` templates
from the ``skaberen/scaffolder/templates/`` directory and renders them with
the per-run context built by the generator.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_PRIMITIVE_WRAPPERS: dict[str, str] = {
    "int": "Integer",
    "long": "Long",
    "double": "Double",
    "float": "Float",
    "short": "Short",
    "byte": "Byte",
    "boolean": "Boolean",
    "char": "Character",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for Java artifacts.

    Undefined context variables raise instead of rendering as empty strings,
    so a missing key surfaces as a failed artifact task.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["camel_case"] = camel_case
        self.env.filters["wrapper_type"] = wrapper_type

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"controller.java.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def camel_case(value: str) -> str:
    """Lower-case the first character: ``OrderItem`` -> ``orderItem``."""
    return value[:1].lower() + value[1:]


def wrapper_type(value: str) -> str:
    """Box a Java primitive for use as a generic argument (``long`` -> ``Long``)."""
    return _PRIMITIVE_WRAPPERS.get(value, value)


def pluralize(name: str) -> str:
    """Naive English plural used for REST route segments."""
    if re.search(r"[^aeiou]y$", name):
        return name[:-1] + "ies"
    if name.endswith(("s", "sh", "ch", "x", "z")):
        return name + "es"
    return name + "s"
