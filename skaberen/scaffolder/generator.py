"""Main scaffolding orchestrator.

Takes ``ResolvedParameters`` and writes the layered Java sources for one
entity: the five core layers first, then the support bundle selected by the
style toggles.  Each batch runs concurrently; failures are collected and
reported once per batch.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from skaberen.config import GeneratorConfig

from .artifacts import ARTIFACT_SPECS
from .models import ResolvedParameters, SupportBundle
from .planner import ArtifactTask, plan_directories, select_artifacts
from .templates import TemplateRenderer, camel_case, pluralize, wrapper_type
from .writer import ArtifactWriter, FilesystemError


# ---------------------------------------------------------------------------
# Exceptions / results
# ---------------------------------------------------------------------------


class AggregateGenerationError(Exception):
    """Raised when one or more artifact tasks of a batch fail."""

    def __init__(self, batch: str, errors: Sequence[Exception], total: int) -> None:
        self.batch = batch
        self.errors = list(errors)
        super().__init__(
            f"{len(self.errors)} of {total} {batch} artifact(s) failed: {self.errors[0]}"
        )


@dataclass
class GenerationResult:
    """Outcome of a successful run."""

    entity_name: str
    directories: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def files(self) -> list[Path]:
        """Every artifact path of the run, written or already present."""
        return sorted(self.written + self.skipped)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class CrudGenerator:
    """Generates entity, repository, service and controller layers.

    Given ``ResolvedParameters``, the generator:
    - creates every planned directory under the target directory
    - renders and writes the core batch concurrently
    - renders and writes the support bundle concurrently, leaving existing
      create-if-absent utilities untouched
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
        writer: ArtifactWriter | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.writer = writer or ArtifactWriter()

    # -- Public API --------------------------------------------------------

    async def generate(self, params: ResolvedParameters) -> GenerationResult:
        """Generate every artifact selected for *params*.

        Returns:
            A ``GenerationResult`` describing directories and files.

        Raises:
            FilesystemError: If the target directory is missing or a planned
                directory cannot be created.  No artifact is written.
            AggregateGenerationError: If any artifact task fails.  Files
                already written stay on disk.
        """
        directories = plan_directories(params)
        selection = select_artifacts(params)
        result = GenerationResult(entity_name=params.entity_name)

        # 1. Every planned directory exists before any task starts
        result.directories = await self._ensure_directories(
            params.target_directory, directories
        )

        context = self._build_context(params)

        # 2. Core layers
        await self._run_batch("core", selection.core, params, context, result)

        # 3. Support bundle
        await self._run_batch("support", selection.support, params, context, result)

        return result

    # -- Directories -------------------------------------------------------

    async def _ensure_directories(
        self, root: Path, directories: frozenset[str]
    ) -> list[Path]:
        if not await asyncio.to_thread(root.is_dir):
            raise FilesystemError(root, "Target directory does not exist")

        paths = [root / d for d in sorted(directories)]
        outcomes = await asyncio.gather(
            *(self.writer.ensure_directory(p) for p in paths),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return paths

    # -- Artifacts ---------------------------------------------------------

    async def _run_batch(
        self,
        batch: str,
        tasks: Sequence[ArtifactTask],
        params: ResolvedParameters,
        context: dict[str, Any],
        result: GenerationResult,
    ) -> None:
        if not tasks:
            return

        outcomes = await asyncio.gather(
            *(self._run_task(task, params, context) for task in tasks),
            return_exceptions=True,
        )

        errors: list[Exception] = []
        for outcome in outcomes:
            if isinstance(outcome, Exception):
                errors.append(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                path, written = outcome
                (result.written if written else result.skipped).append(path)

        if errors:
            raise AggregateGenerationError(batch, errors, len(tasks)) from errors[0]

    async def _run_task(
        self,
        task: ArtifactTask,
        params: ResolvedParameters,
        context: dict[str, Any],
    ) -> tuple[Path, bool]:
        """Render and write one artifact.  Returns ``(path, written)``."""
        spec = ARTIFACT_SPECS[task.kind]
        path = spec.output_path(params)

        if spec.create_if_absent and await self.writer.exists(path):
            return path, False

        task_ctx = {**context, "class_name": path.stem, "methods": task.method_names}
        content = self.renderer.render(spec.template, task_ctx)

        if spec.create_if_absent:
            return path, await self.writer.write_if_absent(path, content)
        await self.writer.write(path, content)
        return path, True

    # -- Context building --------------------------------------------------

    def _build_context(self, params: ResolvedParameters) -> dict[str, Any]:
        """Build the Jinja2 template context shared by every artifact."""
        root_package = _java_package(params.target_directory, self.config.base_package)
        packages = {
            name: _sub_package(root_package, name)
            for name in (
                "entities",
                "controllers",
                "repositories",
                "services",
                "models",
                "configurations",
                "exceptions",
                "utils",
            )
        }
        packages["services_impl"] = _sub_package(root_package, "services.impl")

        if params.support_bundle is SupportBundle.RESULT_WRAPPER_NO_UTILS:
            utils_package = self.config.external_utils_package
        else:
            utils_package = packages["utils"]

        entity_var = camel_case(params.entity_name)
        return {
            "entity_name": params.entity_name,
            "entity_var": entity_var,
            "route": pluralize(entity_var),
            "id_type": params.type_variable_id,
            "id_wrapper": wrapper_type(params.type_variable_id),
            "packages": packages,
            "utils_package": utils_package,
            "use_resul_proc": params.use_resul_proc,
            "use_util_class": params.use_util_class,
            "methods": [],
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _java_package(target: Path, fallback: str = "") -> str:
    """Derive the Java package of *target* from its path below ``java/``.

    E.g. ``/app/src/main/java/com/acme/shop`` -> ``com.acme.shop``.  Falls back
    to *fallback* when the path has no ``java`` source root.
    """
    parts = target.parts
    if "java" in parts:
        index = len(parts) - 1 - parts[::-1].index("java")
        package = ".".join(parts[index + 1:])
        if package:
            return package
    return fallback.strip(".")


def _sub_package(root: str, name: str) -> str:
    return f"{root}.{name}" if root else name
