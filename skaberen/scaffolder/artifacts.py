"""Catalog of the artifact kinds the scaffolder can produce.

Each kind maps to one Jinja2 template and one output path relative to the
target directory.  Paths only depend on the entity name, so no two kinds ever
write to the same file within a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .models import ResolvedParameters


class ArtifactKind(str, Enum):
    """Every file the scaffolder knows how to render."""
    ENTITY = "entity"
    SERVICE_INTERFACE = "service_interface"
    SERVICE_IMPL = "service_impl"
    CONTROLLER = "controller"
    REPOSITORY = "repository"
    SEARCH_PAGINATION = "search_pagination"
    CONTROLLER_EXCEPTION_HANDLER = "controller_exception_handler"
    ERROR_MESSAGE = "error_message"
    UNSAVED_ENTITY_EXCEPTION = "unsaved_entity_exception"
    ERROR_PROCESSING_EXCEPTION = "error_processing_exception"
    ENTITY_NOT_FOUND_EXCEPTION = "entity_not_found_exception"
    RESULT_PROC = "result_proc"
    UTIL = "util"


@dataclass(frozen=True)
class ArtifactSpec:
    """Where an artifact kind is written and which template renders it."""

    template: str
    path: str
    create_if_absent: bool = False

    def output_path(self, params: ResolvedParameters) -> Path:
        return params.target_directory / self.path.format(entity=params.entity_name)


ARTIFACT_SPECS: dict[ArtifactKind, ArtifactSpec] = {
    ArtifactKind.ENTITY: ArtifactSpec(
        "entity.java.j2", "entities/{entity}.java"
    ),
    ArtifactKind.SERVICE_INTERFACE: ArtifactSpec(
        "service_interface.java.j2", "services/I{entity}Service.java"
    ),
    ArtifactKind.SERVICE_IMPL: ArtifactSpec(
        "service_impl.java.j2", "services/impl/{entity}Service.java"
    ),
    ArtifactKind.CONTROLLER: ArtifactSpec(
        "controller.java.j2", "controllers/{entity}Controller.java"
    ),
    ArtifactKind.REPOSITORY: ArtifactSpec(
        "repository.java.j2", "repositories/I{entity}Repository.java"
    ),
    ArtifactKind.SEARCH_PAGINATION: ArtifactSpec(
        "search_pagination.java.j2", "utils/SearchPagination.java", create_if_absent=True
    ),
    ArtifactKind.CONTROLLER_EXCEPTION_HANDLER: ArtifactSpec(
        "controller_exception_handler.java.j2",
        "configurations/ControllerExceptionHandler.java",
    ),
    ArtifactKind.ERROR_MESSAGE: ArtifactSpec(
        "error_message.java.j2", "models/ErrorMessage.java"
    ),
    ArtifactKind.UNSAVED_ENTITY_EXCEPTION: ArtifactSpec(
        "exception.java.j2", "exceptions/UnsavedEntityException.java"
    ),
    ArtifactKind.ERROR_PROCESSING_EXCEPTION: ArtifactSpec(
        "exception.java.j2", "exceptions/ErrorProcessingException.java"
    ),
    ArtifactKind.ENTITY_NOT_FOUND_EXCEPTION: ArtifactSpec(
        "exception.java.j2", "exceptions/EntityNotFoundException.java"
    ),
    ArtifactKind.RESULT_PROC: ArtifactSpec(
        "result_proc.java.j2", "utils/ResultadoProc.java", create_if_absent=True
    ),
    ArtifactKind.UTIL: ArtifactSpec(
        "util.java.j2", "utils/Util.java", create_if_absent=True
    ),
}

# Kinds whose rendered bodies depend on the checked methods.
METHOD_AWARE_KINDS: frozenset[ArtifactKind] = frozenset({
    ArtifactKind.SERVICE_INTERFACE,
    ArtifactKind.SERVICE_IMPL,
    ArtifactKind.CONTROLLER,
})
