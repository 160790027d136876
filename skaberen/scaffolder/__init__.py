"""Skaberen scaffolder -- generates layered CRUD sources for one entity.

This module takes the user's choices (entity name, identifier type, methods
and two style toggles), plans the output directories and artifacts, and
renders Java entity, repository, service and controller classes plus the
selected support bundle.

Quick usage::

    from skaberen.scaffolder import CrudGenerator, resolve_parameters, select_methods

    params = resolve_parameters(
        "order",
        "/app/src/main/java/com/acme/shop",
        "long",
        select_methods(["findAll", "findById"]),
        use_util_class=True,
        use_resul_proc=False,
    )
    result = await CrudGenerator().generate(params)
"""

from skaberen.scaffolder.generator import (
    AggregateGenerationError,
    CrudGenerator,
    GenerationResult,
)
from skaberen.scaffolder.models import (
    IdentifierType,
    InvalidInputError,
    MethodDescriptor,
    ResolvedParameters,
    SupportBundle,
    default_methods,
    resolve_parameters,
    select_methods,
)
from skaberen.scaffolder.planner import plan_directories, select_artifacts
from skaberen.scaffolder.templates import TemplateRenderer
from skaberen.scaffolder.writer import ArtifactWriter, FilesystemError

__all__ = [
    "AggregateGenerationError",
    "ArtifactWriter",
    "CrudGenerator",
    "FilesystemError",
    "GenerationResult",
    "IdentifierType",
    "InvalidInputError",
    "MethodDescriptor",
    "ResolvedParameters",
    "SupportBundle",
    "TemplateRenderer",
    "default_methods",
    "plan_directories",
    "resolve_parameters",
    "select_artifacts",
    "select_methods",
]
