from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from changed_files.core.config import BuildInfo
from changed_files.core.config_loader import load_config
from changed_files.core.errors import ConfigError, ExecutionError, PatternError
from changed_files.core.logging import get_logger, set_verbose
from changed_files.core.resolver import (
    ChangeSetResolver,
    collapse_to_folders,
    compile_pattern,
    sorted_paths,
)

EXIT_OK = 0
EXIT_NO_CHANGES = 1
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser(build: BuildInfo) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changed-files",
        description="List files changed according to git, prefixed by a command.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", nargs="?", default=None, help="Command prefix.")
    parser.add_argument(
        "-l",
        "--lastCommit",
        "--last-commit",
        dest="last_commit",
        action="store_true",
        default=None,
        help="Only files touched by the last commit.",
    )
    parser.add_argument(
        "-w",
        "--withAncestor",
        "--with-ancestor",
        dest="with_ancestor",
        action="store_true",
        default=None,
        help="Include changes since the parent of HEAD.",
    )
    parser.add_argument(
        "-s",
        "--changedSince",
        "--changed-since",
        dest="changed_since",
        metavar="REF",
        default=None,
        help="Include changes since REF.",
    )
    parser.add_argument("-f", "--filter", metavar="REGEX", default=None, help="Filter regex.")
    parser.add_argument(
        "--folder",
        action="store_true",
        default=None,
        help="Print containing folders instead of files.",
    )
    parser.add_argument("-C", "--cwd", default=None, help="Run as if started in this directory.")
    parser.add_argument("--verbose", action="store_true", help="Log git invocations to stderr.")
    parser.add_argument("-v", "--version", action="version", version=build.describe())
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    keys = ("last_commit", "with_ancestor", "changed_since", "filter", "folder", "command")
    return {key: getattr(args, key) for key in keys if getattr(args, key) is not None}


def main(argv: Sequence[str] | None = None, build: BuildInfo | None = None) -> int:
    parser = build_parser(build or BuildInfo.current())
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    logger = get_logger()

    cwd = os.path.abspath(args.cwd) if args.cwd else os.getcwd()
    try:
        config = load_config(Path(cwd), _overrides(args))
        pattern = compile_pattern(config.filter)
    except (ConfigError, PatternError) as exc:
        print(f"changed-files: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logger.debug("resolving in %s with %s", cwd, config.options)
    try:
        files = ChangeSetResolver(git=config.git).resolve(cwd, config.options, pattern)
    except ExecutionError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE

    if not files:
        logger.debug("no changed files")
        return EXIT_NO_CHANGES

    if config.folder:
        files = collapse_to_folders(files)

    sys.stdout.write(f"{config.command} {' '.join(sorted_paths(files))}")
    sys.stdout.flush()
    return EXIT_OK


def entrypoint() -> None:
    raise SystemExit(main())
