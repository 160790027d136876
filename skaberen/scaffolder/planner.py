"""Directory and artifact planning for a scaffolding run.

Both planners are pure functions of ``ResolvedParameters``: they decide what
must exist, the generator decides how and when it gets written.
"""

from __future__ import annotations

from dataclasses import dataclass

from .artifacts import METHOD_AWARE_KINDS, ArtifactKind
from .models import MethodDescriptor, ResolvedParameters, SupportBundle


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------

CORE_DIRECTORIES: tuple[str, ...] = (
    "entities",
    "controllers",
    "repositories",
    "services",
    "services/impl",
)

ERROR_DIRECTORIES: tuple[str, ...] = (
    "models",
    "configurations",
    "exceptions",
)


def plan_directories(params: ResolvedParameters) -> frozenset[str]:
    """Return the relative directories that must exist before generation.

    ``utils`` follows the support bundle rather than ``use_util_class`` alone:
    it is planned whenever the bundle ships local utility sources. Without the
    result wrapper ``use_util_class`` is ignored, so (use_resul_proc=False,
    use_util_class=False) still plans ``utils``, where a flag-by-flag reading
    of the directory table would omit it. That bundle always writes
    ``utils/SearchPagination.java``.
    """
    dirs = set(CORE_DIRECTORIES)
    bundle = params.support_bundle
    if bundle is not SupportBundle.RESULT_WRAPPER_NO_UTILS:
        dirs.add("utils")
    if bundle is SupportBundle.NO_RESULT_WRAPPER:
        dirs.update(ERROR_DIRECTORIES)
    return frozenset(dirs)


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------

CORE_ARTIFACTS: tuple[ArtifactKind, ...] = (
    ArtifactKind.ENTITY,
    ArtifactKind.SERVICE_INTERFACE,
    ArtifactKind.SERVICE_IMPL,
    ArtifactKind.CONTROLLER,
    ArtifactKind.REPOSITORY,
)

SUPPORT_BUNDLES: dict[SupportBundle, tuple[ArtifactKind, ...]] = {
    SupportBundle.NO_RESULT_WRAPPER: (
        ArtifactKind.SEARCH_PAGINATION,
        ArtifactKind.CONTROLLER_EXCEPTION_HANDLER,
        ArtifactKind.ERROR_MESSAGE,
        ArtifactKind.UNSAVED_ENTITY_EXCEPTION,
        ArtifactKind.ERROR_PROCESSING_EXCEPTION,
        ArtifactKind.ENTITY_NOT_FOUND_EXCEPTION,
    ),
    SupportBundle.RESULT_WRAPPER_WITH_UTILS: (
        ArtifactKind.RESULT_PROC,
        ArtifactKind.SEARCH_PAGINATION,
        ArtifactKind.UTIL,
    ),
    # Shared utilities come from an external package.
    SupportBundle.RESULT_WRAPPER_NO_UTILS: (),
}


@dataclass(frozen=True)
class ArtifactTask:
    """One artifact to generate, with the methods its body should contain."""

    kind: ArtifactKind
    methods: tuple[MethodDescriptor, ...] = ()

    @property
    def method_names(self) -> list[str]:
        return [m.method_name for m in self.methods]


@dataclass(frozen=True)
class ArtifactSelection:
    """Generation tasks split into the core layers and the support bundle."""

    core: tuple[ArtifactTask, ...]
    support: tuple[ArtifactTask, ...]

    @property
    def tasks(self) -> tuple[ArtifactTask, ...]:
        return self.core + self.support

    def __len__(self) -> int:
        return len(self.core) + len(self.support)


def select_artifacts(params: ResolvedParameters) -> ArtifactSelection:
    """Decide which artifacts a run produces.

    The core batch is always the same five layers.  Controller and service
    tasks receive the checked methods unchanged and in order.  The support
    batch is picked by the run's ``SupportBundle``.
    """
    checked = params.checked_methods

    def _task(kind: ArtifactKind) -> ArtifactTask:
        if kind in METHOD_AWARE_KINDS:
            return ArtifactTask(kind, checked)
        return ArtifactTask(kind)

    return ArtifactSelection(
        core=tuple(_task(kind) for kind in CORE_ARTIFACTS),
        support=tuple(_task(kind) for kind in SUPPORT_BUNDLES[params.support_bundle]),
    )
