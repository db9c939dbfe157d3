"""CLI entrypoints for projutil commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .classifier import ProjectClassifier
from .errors import ProjectError, UnknownProjectTypeError
from .logging import configure_logging, get_logger
from .models import LegacyHeuristic, ProjectType
from .modpath import resolve_module_path
from .notices import print_deprecation_warning
from .patcher import insert_after_marker

_LOGGER = get_logger("cli")

_LEGACY_LAYOUT_NOTICE = (
    "Projects without a PROJECT file use the legacy layout, which will be removed "
    "in a future release."
)

# Commands that inspect a project directory given as an optional positional path.
_PATH_COMMANDS = {
    "root": "Check that a directory is an operator project root.",
    "type": "Print the operator type (go, ansible, helm) of a project.",
    "module-path": "Print the Go module path of a project.",
}


def _add_logging_options(
    parser: argparse.ArgumentParser, *, subcommand: bool = False
) -> None:
    # Subcommands suppress defaults so values given before the command survive.
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if subcommand else False,
        help="Show debug output on stderr.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if subcommand else None,
        help="Also write a debug log to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projutil",
        description="Inspect operator projects and patch scaffolded files.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in _PATH_COMMANDS.items():
        command_parser = subparsers.add_parser(name, help=help_text)
        _add_logging_options(command_parser, subcommand=True)
        command_parser.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Path to the project root (defaults to current directory).",
        )

    insert_parser = subparsers.add_parser(
        "insert",
        help="Insert a line after the last line containing a marker.",
    )
    _add_logging_options(insert_parser, subcommand=True)
    insert_parser.add_argument("file", help="File to modify in place.")
    insert_parser.add_argument("marker", help="Marker text locating the insertion point.")
    insert_parser.add_argument("content", help="Line of text to insert.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for projutil commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        _run(args)
    except ProjectError as exc:
        _LOGGER.debug("%s failed", args.command, exc_info=True)
        _LOGGER.error("%s", exc)
        parser.exit(1)


def _run(args: argparse.Namespace) -> None:
    if args.command == "root":
        classifier = ProjectClassifier(args.path)
        classifier.check_project_root()
        _warn_if_legacy(classifier)
        print("project root")
    elif args.command == "type":
        classifier = ProjectClassifier(args.path)
        classifier.check_project_root()
        _warn_if_legacy(classifier)
        project_type = classifier.classify()
        if project_type is ProjectType.UNKNOWN:
            raise UnknownProjectTypeError()
        print(project_type)
    elif args.command == "module-path":
        print(resolve_module_path(args.path))
    elif args.command == "insert":
        content = args.content if args.content.endswith("\n") else args.content + "\n"
        insert_after_marker(args.file, args.marker, content)
        _LOGGER.info("Updated %s", args.file)


def _warn_if_legacy(classifier: ProjectClassifier) -> None:
    if isinstance(classifier.layout_source(), LegacyHeuristic):
        print_deprecation_warning(_LEGACY_LAYOUT_NOTICE)


if __name__ == "__main__":
    main(sys.argv[1:])
