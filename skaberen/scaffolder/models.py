"""Pydantic v2 models for a single scaffolding run.

Defines the method catalog offered to the user, the resolved parameter record
every generation step reads from, and the resolver that turns raw user choices
into that record.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


ENTITY_PLACEHOLDER = "__ENTITY__"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InvalidInputError(ValueError):
    """Raised when a required user choice is blank or not usable as a file name."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class IdentifierType(str, Enum):
    """Identifier types offered by default. Any other non-empty type is accepted."""
    INT = "int"
    LONG = "long"
    STRING = "String"


class SupportBundle(str, Enum):
    """Which cross-cutting support artifacts accompany the core layers.

    The two style toggles only produce three distinct bundles: without the
    result wrapper the utility toggle has no effect.
    """
    NO_RESULT_WRAPPER = "no_result_wrapper"
    RESULT_WRAPPER_WITH_UTILS = "result_wrapper_with_utils"
    RESULT_WRAPPER_NO_UTILS = "result_wrapper_no_utils"

    @classmethod
    def from_flags(cls, use_resul_proc: bool, use_util_class: bool) -> "SupportBundle":
        if not use_resul_proc:
            return cls.NO_RESULT_WRAPPER
        if use_util_class:
            return cls.RESULT_WRAPPER_WITH_UTILS
        return cls.RESULT_WRAPPER_NO_UTILS


# ---------------------------------------------------------------------------
# Method descriptors
# ---------------------------------------------------------------------------


class MethodDescriptor(BaseModel):
    """A CRUD operation the generated controller and service may expose."""

    model_config = ConfigDict(frozen=True)

    method_name: str = Field(..., min_length=1)
    description: str = Field(default="", description="May embed the __ENTITY__ placeholder")
    checked: bool = Field(default=False)

    def describe(self, entity_name: str) -> str:
        """Return the description with the entity name substituted in."""
        return self.description.replace(ENTITY_PLACEHOLDER, entity_name)


_CATALOG: tuple[tuple[str, str], ...] = (
    ("findAll", "List every __ENTITY__"),
    ("findById", "Find a __ENTITY__ by its identifier"),
    ("save", "Create a new __ENTITY__"),
    ("update", "Update an existing __ENTITY__"),
    ("deleteById", "Delete a __ENTITY__ by its identifier"),
    ("search", "Search __ENTITY__ records page by page"),
)


def default_methods() -> tuple[MethodDescriptor, ...]:
    """Build a fresh method catalog with every operation checked."""
    return tuple(
        MethodDescriptor(method_name=name, description=description, checked=True)
        for name, description in _CATALOG
    )


def select_methods(
    names: Iterable[str],
    catalog: Iterable[MethodDescriptor] | None = None,
) -> tuple[MethodDescriptor, ...]:
    """Return a copy of *catalog* where exactly the named methods are checked.

    Names are compared after trimming whitespace. Unknown names are ignored.
    """
    wanted = {name.strip() for name in names}
    source = default_methods() if catalog is None else tuple(catalog)
    return tuple(
        method.model_copy(update={"checked": method.method_name.strip() in wanted})
        for method in source
    )


# ---------------------------------------------------------------------------
# Resolved parameters
# ---------------------------------------------------------------------------


class ResolvedParameters(BaseModel):
    """Immutable record of everything one generation run needs.

    Validation happens on construction, so a record built directly holds the
    same guarantees as one returned by ``resolve_parameters``: trimmed,
    non-blank strings, an upper-cased first letter on the entity name and an
    entity name that cannot leave the target directory when used in a path.
    """

    model_config = ConfigDict(frozen=True)

    entity_name: str
    target_directory: Path
    type_variable_id: str
    methods_selected: tuple[MethodDescriptor, ...] = Field(default_factory=tuple)
    use_util_class: bool = True
    use_resul_proc: bool = False

    @field_validator("entity_name", mode="before")
    @classmethod
    def _normalise_entity_name(cls, value: Any) -> str:
        name = str(value or "").strip()
        if not name:
            raise InvalidInputError("The class name must not be empty!")
        if "/" in name or "\\" in name or ".." in name:
            raise InvalidInputError(f"The class name must not contain path segments: {name}")
        return capitalize_entity_name(name)

    @field_validator("type_variable_id", mode="before")
    @classmethod
    def _normalise_type_variable_id(cls, value: Any) -> str:
        id_type = str(value or "").strip()
        if not id_type:
            raise InvalidInputError("Variable type is invalid")
        return id_type

    @field_validator("target_directory")
    @classmethod
    def _absolute_target(cls, value: Path) -> Path:
        return value.absolute()

    @property
    def support_bundle(self) -> SupportBundle:
        return SupportBundle.from_flags(self.use_resul_proc, self.use_util_class)

    @property
    def checked_methods(self) -> tuple[MethodDescriptor, ...]:
        """Checked methods, in their original order."""
        return tuple(m for m in self.methods_selected if m.checked)


def capitalize_entity_name(name: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Examples::

        capitalize_entity_name("order")     -> "Order"
        capitalize_entity_name("orderItem") -> "OrderItem"
    """
    return name[:1].upper() + name[1:]


def resolve_parameters(
    entity_name: str | None,
    target_directory: str | Path,
    type_variable_id: str | None,
    methods_selected: Iterable[MethodDescriptor] = (),
    use_util_class: bool = True,
    use_resul_proc: bool = False,
) -> ResolvedParameters:
    """Build a ``ResolvedParameters`` record from raw user choices.

    Args:
        entity_name: Name of the entity class to scaffold.
        target_directory: Directory that receives the generated layers.
        type_variable_id: Java type of the entity identifier.
        methods_selected: Method catalog with ``checked`` flags already set.
        use_util_class: Generate local utility classes (only meaningful with
            the result wrapper).
        use_resul_proc: Wrap service and controller results in ``ResultadoProc``.

    Returns:
        A frozen ``ResolvedParameters`` instance.

    Raises:
        InvalidInputError: If the entity name or identifier type is blank, or
            the entity name contains path separators or ``..``.
    """
    try:
        return ResolvedParameters(
            entity_name=entity_name,
            target_directory=Path(target_directory),
            type_variable_id=type_variable_id,
            methods_selected=tuple(methods_selected),
            use_util_class=use_util_class,
            use_resul_proc=use_resul_proc,
        )
    except ValidationError as exc:
        raise _input_error(exc) from exc


def _input_error(exc: ValidationError) -> InvalidInputError:
    """Return the ``InvalidInputError`` a field validator raised, if any."""
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, InvalidInputError):
            return cause
    return InvalidInputError(str(exc))
