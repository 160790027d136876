"""Command-line entry point for the Skaberen scaffolder.

Usage::

    skaberen src/main/java/com/acme/shop --entity order --id-type long
    python -m skaberen.cli . -e Invoice -t String --methods findAll,findById --result-proc
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.prompt import Prompt

from skaberen.config import GeneratorConfig
from skaberen.scaffolder import (
    AggregateGenerationError,
    CrudGenerator,
    FilesystemError,
    IdentifierType,
    InvalidInputError,
    default_methods,
    resolve_parameters,
    select_methods,
)
from skaberen.utils import (
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

_OTHER_TYPE = "other"


def _prompt_identifier_type() -> str:
    choices = [t.value for t in IdentifierType] + [_OTHER_TYPE]
    answer = Prompt.ask("Identifier Variable Type", choices=choices, console=console)
    if answer == _OTHER_TYPE:
        answer = Prompt.ask("Identifier Variable Type (Ex: long)", console=console)
    return answer


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skaberen",
        description="Skaberen -- scaffold entity, repository, service and controller layers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  skaberen src/main/java/com/acme/shop -e order -t long\n"
            "  skaberen . -e Invoice -t String --methods findAll,findById --result-proc\n"
        ),
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=".",
        help="Existing directory that receives the generated layers (default: .)",
    )
    parser.add_argument("--entity", "-e", default=None, help="Entity class name (prompted if omitted)")
    parser.add_argument(
        "--id-type", "-t", default=None, help="Identifier type, e.g. int, long, String (prompted if omitted)"
    )
    parser.add_argument(
        "--methods", "-m",
        default=None,
        help="Comma-separated methods to generate (default: all)",
    )
    parser.add_argument(
        "--result-proc",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrap service results in ResultadoProc",
    )
    parser.add_argument(
        "--util-class",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate local utility classes instead of importing shared ones",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``skaberen``."""
    args = _build_parser().parse_args(argv)

    try:
        config = GeneratorConfig.load(args.config) if args.config else GeneratorConfig.from_env()
    except (OSError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    target = Path(args.target)
    if not target.is_dir():
        print_error("Please select a valid directory")
        sys.exit(1)

    entity_name = args.entity if args.entity is not None else Prompt.ask("Entity Name", console=console)
    type_variable_id = args.id_type if args.id_type is not None else _prompt_identifier_type()

    if args.methods is None:
        methods = default_methods()
    else:
        names = [n.strip() for n in args.methods.split(",") if n.strip()]
        methods = select_methods(names)
        unknown = sorted(set(names) - {m.method_name for m in methods})
        if unknown:
            print_warning(f"Ignoring unknown methods: {', '.join(unknown)}")

    use_resul_proc = config.use_result_proc if args.result_proc is None else args.result_proc
    use_util_class = config.use_util_class if args.util_class is None else args.util_class

    try:
        params = resolve_parameters(
            entity_name,
            target,
            type_variable_id,
            methods,
            use_util_class=use_util_class,
            use_resul_proc=use_resul_proc,
        )
    except InvalidInputError as exc:
        print_error(str(exc))
        sys.exit(1)

    started = time.monotonic()
    try:
        result = asyncio.run(CrudGenerator(config).generate(params))
    except (FilesystemError, AggregateGenerationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    for path in result.skipped:
        print_warning(f"Kept existing {path.relative_to(params.target_directory)}")

    print_summary_table(
        {
            "Entity": params.entity_name,
            "Identifier": params.type_variable_id,
            "Methods": ", ".join(m.method_name for m in params.checked_methods) or "-",
            "Support bundle": params.support_bundle.value,
            "Files written": str(len(result.written)),
            "Elapsed": format_duration(time.monotonic() - started),
        },
        title="Skaberen",
    )
    print_success(f"Success! Code {params.entity_name} generated successfully")


if __name__ == "__main__":
    main()
