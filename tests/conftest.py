"""Shared pytest fixtures for the Skaberen test suite.

Provides reusable fixtures for:
- A temporary Java source root to generate into
- Method selections
- A factory for ``ResolvedParameters``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from skaberen.scaffolder.models import (
    MethodDescriptor,
    ResolvedParameters,
    resolve_parameters,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Existing package directory below a Maven-style ``src/main/java`` root."""
    path = tmp_path / "src" / "main" / "java" / "com" / "acme" / "shop"
    path.mkdir(parents=True)
    yield path


# ---------------------------------------------------------------------------
# Methods & parameters
# ---------------------------------------------------------------------------

@pytest.fixture
def order_methods() -> tuple[MethodDescriptor, ...]:
    """findAll and findById checked, save left unchecked."""
    return (
        MethodDescriptor(method_name="findAll", description="List every __ENTITY__", checked=True),
        MethodDescriptor(method_name="findById", description="Find a __ENTITY__", checked=True),
        MethodDescriptor(method_name="save", description="Create a new __ENTITY__", checked=False),
    )


@pytest.fixture
def make_params(
    target_dir: Path, order_methods: tuple[MethodDescriptor, ...]
) -> Callable[..., ResolvedParameters]:
    """Factory for ``ResolvedParameters`` of an ``Order`` entity."""

    def _make(**overrides: Any) -> ResolvedParameters:
        kwargs: dict[str, Any] = {
            "entity_name": "Order",
            "target_directory": target_dir,
            "type_variable_id": "long",
            "methods_selected": order_methods,
            "use_util_class": True,
            "use_resul_proc": False,
        }
        kwargs.update(overrides)
        return resolve_parameters(**kwargs)

    return _make
