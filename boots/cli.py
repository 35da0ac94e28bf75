"""Command-line entry point for boots.

Usage::

    boots service my-api --options postgres,grpc
    boots cli my-tool --options client
    boots lib my-crate
    boots sample my-board
    boots add gh:test
    boots list-templates modules/

Also works as a cargo subcommand (``cargo boots ...``): cargo passes
``boots`` as the first argument, which is dropped before parsing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.logging import RichHandler
from rich.markup import escape

from boots.config import Config
from boots.scaffolder import (
    ADD_TARGETS,
    OPTION_KEYWORDS,
    BootsError,
    ProjectGenerator,
    ProjectType,
    add,
    open_store,
    parse_options,
)
from boots.scaffolder.identity import git_identity
from boots.scaffolder.options import SAMPLE_OPTION
from boots.utils import console, print_error, print_success, print_summary_table, print_tree

logger = logging.getLogger("boots")

_DESCRIPTION = (
    "Bootstrap modular Rust projects.\n\n"
    "Creates workspace-based projects with optional modules like API, runtime,\n"
    "persistence, and more."
)


def _examples(prog: str) -> str:
    return (
        "Examples:\n"
        f"  {prog} service my-api --options postgres,grpc\n"
        f"  {prog} cli my-tool --options client\n"
        f"  {prog} lib my-crate\n"
        f"  {prog} sample my-board\n"
        f"  {prog} add gh:test\n"
    )


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser(prog: str = "boots") -> argparse.ArgumentParser:
    """Build the ``argparse`` parser for *prog*."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_examples(prog),
    )
    parser.add_argument(
        "--output", "-C",
        default=None,
        help="Directory the project is created in (default: current directory)",
    )
    parser.add_argument(
        "--templates",
        default=None,
        metavar="DIR_OR_URL",
        help="Template directory, or http(s) URL of a zip archive of templates",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    option_help = f"Comma-separated options [possible: {', '.join(OPTION_KEYWORDS)}]"
    for project_type in ProjectType:
        cmd = sub.add_parser(
            project_type.value,
            help=project_type.description,
            description=project_type.description,
        )
        cmd.add_argument("name", metavar="NAME", help="Project name (e.g. my-api)")
        if project_type is ProjectType.SAMPLE:
            cmd.add_argument(
                "--options", "-o",
                default=None,
                help="Use 'sample' to create the full board project (ignores other options)",
            )
        elif project_type is not ProjectType.LIB:
            cmd.add_argument("--options", "-o", default=None, help=option_help)

    add_cmd = sub.add_parser(
        "add",
        help="Add a workflow or benchmark to an existing project",
        description="\n".join(f"  {t:<10} {d}" for t, d in ADD_TARGETS.items()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_cmd.add_argument("target", metavar="TARGET", help=", ".join(ADD_TARGETS))
    add_cmd.add_argument(
        "--path",
        default=".",
        help="Project directory (default: current directory)",
    )

    list_cmd = sub.add_parser("list-templates", help="List the available template paths")
    list_cmd.add_argument("prefix", nargs="?", default="", help="Only paths starting with PREFIX")

    return parser


def _strip_cargo_arg(argv: list[str]) -> tuple[str, list[str]]:
    if argv and argv[0] == "boots":
        return "cargo boots", argv[1:]
    return "boots", argv


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_generate(args: argparse.Namespace, config: Config) -> None:
    project_type = ProjectType(args.command)
    options = getattr(args, "options", None)
    if project_type is ProjectType.SAMPLE and options is None:
        options = SAMPLE_OPTION

    project = parse_options(
        project_type,
        args.name,
        options,
        identity=lambda: git_identity(config.git_timeout),
    )
    store = open_store(config)
    result = ProjectGenerator(project, store).generate(config.output_dir)

    print_summary_table(
        {
            "Type": project.project_type.value,
            "Modules": ", ".join(m.value for m in project.modules()),
            "Persistence": project.persistence.value if project.persistence else "-",
            "Frontend": project.frontend.value if project.frontend else "-",
            "gRPC": "yes" if project.has_grpc else "no",
            "Templates": config.template_source,
            "Files": str(len(result.files)),
        },
        title=project.name,
    )
    print_tree(result.root, result.files)
    print_success(f"Project '{project.name}' created successfully!")


def _cmd_add(args: argparse.Namespace, config: Config) -> None:
    store = open_store(config)
    written = add(args.target, args.path, store)
    for path in written:
        console.print(f"  [green]+[/green] {escape(path.as_posix())}")
    print_success(f"Added {args.target}")


def _cmd_list_templates(args: argparse.Namespace, config: Config) -> None:
    store = open_store(config)
    for path in store.list_templates(args.prefix):
        console.print(escape(path), highlight=False)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``boots`` and ``cargo boots``."""
    prog, argv = _strip_cargo_arg(list(sys.argv[1:] if argv is None else argv))
    args = build_parser(prog).parse_args(argv)

    try:
        config = Config.from_env().with_templates(args.templates)
        if args.output is not None:
            config = config.model_copy(update={"output_dir": Path(args.output)})
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    _setup_logging("DEBUG" if args.verbose else config.log_level)
    logger.debug("templates: %s", config.template_source)

    try:
        if args.command == "add":
            _cmd_add(args, config)
        elif args.command == "list-templates":
            _cmd_list_templates(args, config)
        else:
            _cmd_generate(args, config)
    except (BootsError, OSError) as exc:
        print_error(str(exc))
        sys.exit(1)
    except ValidationError as exc:
        print_error(f"Invalid project: {exc.errors()[0]['msg']}")
        sys.exit(1)


if __name__ == "__main__":
    main()
