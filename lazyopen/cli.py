"""Command-line front door for lazyopen.

Parses CLI options, builds the picker configuration and terminal host, runs
the interactive overlay, then hands opened paths to ``$EDITOR`` (or prints
them).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .editor import launch_editor
from .runtime.app import run_picker
from .runtime.config import DefaultInputValue, load_picker_config
from .runtime.controller import PickerController
from .runtime.host import TerminalHost
from .ui_theme import available_theme_names, resolve_theme

LOG_FILE_ENV = "LAZYOPEN_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

DEFAULT_INPUT_CHOICES = {
    "active": DefaultInputValue.ACTIVE_FILE_DIRECTORY,
    "project": DefaultInputValue.PROJECT_ROOT,
    "empty": DefaultInputValue.EMPTY,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyopen",
        description="Open or create files by typing paths in a terminal picker.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Active document; the picker starts in its directory.")
    parser.add_argument(
        "--project",
        action="append",
        default=None,
        metavar="DIR",
        help="Project folder (repeatable). Defaults to the current directory.",
    )
    parser.add_argument("--fuzzy", action="store_true", default=None, help="Use fuzzy instead of prefix matching.")
    parser.add_argument(
        "--create-directories",
        action="store_true",
        default=None,
        help="Create a typed directory path that does not exist.",
    )
    parser.add_argument(
        "--create-file-instantly",
        action="store_true",
        default=None,
        help="Write new files to disk before opening them.",
    )
    parser.add_argument(
        "--dir-switch",
        action="store_true",
        default=None,
        help="Enable the //, ~/ and :/ directory shortcuts.",
    )
    parser.add_argument(
        "--default-input",
        choices=sorted(DEFAULT_INPUT_CHOICES),
        default=None,
        help="Initial contents of the path input.",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="GLOB",
        help="Filename glob hidden from the list (repeatable; replaces configured patterns).",
    )
    parser.add_argument("--print", dest="print_paths", action="store_true", help="Print opened paths instead of editing.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", default=None, metavar="FILE", help=f"Write logs to FILE (or ${LOG_FILE_ENV}).")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Log to ``log_file`` when given; the TUI owns the terminal otherwise."""
    target = log_file or os.environ.get(LOG_FILE_ENV)
    if not target:
        logging.getLogger("lazyopen").addHandler(logging.NullHandler())
        return
    logging.basicConfig(filename=target, level=logging.DEBUG, format=LOG_FORMAT)


def build_host(args: argparse.Namespace) -> TerminalHost:
    document_path = str(Path(args.path).resolve()) if args.path else None
    project_dirs = args.project or [os.getcwd()]
    projects: list[str] = []
    for project in project_dirs:
        resolved = str(Path(project).resolve())
        if not Path(resolved).is_dir():
            raise SystemExit(f"Project folder not found: {project}")
        if resolved not in projects:
            projects.append(resolved)
    return TerminalHost(document_path=document_path, projects=projects)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, run the picker, and act on opened paths."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    config = load_picker_config().with_overrides(
        fuzzy_match=args.fuzzy,
        create_directories=args.create_directories,
        create_file_instantly=args.create_file_instantly,
        helm_dir_switch=args.dir_switch,
        default_input_value=DEFAULT_INPUT_CHOICES.get(args.default_input),
        ignored_patterns=tuple(args.ignore) if args.ignore is not None else None,
    )
    host = build_host(args)
    controller = PickerController(config, host, background_listing=True)

    run_picker(controller, host, resolve_theme(args.theme, no_color=args.no_color))

    for notification in host.notifications:
        print(notification.format(), file=sys.stderr)

    if not host.opened_paths:
        return 0
    if args.print_paths:
        for path in host.opened_paths:
            print(path)
        return 0
    error = launch_editor(host.opened_paths)
    if error is not None:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
