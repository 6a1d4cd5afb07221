from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Sequence

from changed_files.core.errors import ExecutionError
from changed_files.core.logging import get_logger

STAGED = ("diff", "--cached", "--name-only")
WORKING_TREE = ("ls-files", "--other", "--modified", "--exclude-standard")
LAST_COMMIT = ("show", "--name-only", "--pretty=format:", "HEAD")


def since(ref: str) -> tuple[str, ...]:
    return ("diff", "--name-only", f"{ref}...HEAD")


def run_query(
    cwd: str,
    args: Sequence[str],
    pattern: re.Pattern[str] | None = None,
    *,
    git: str = "git",
) -> list[str]:
    """Run one git query in ``cwd`` and return the absolute paths it reports.

    ``pattern`` is matched against each repository-relative line before it is
    joined with ``cwd``.
    """
    logger = get_logger()
    logger.debug("git %s (cwd=%s)", " ".join(args), cwd)
    try:
        result = subprocess.run(
            [git, *args],
            cwd=cwd,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise ExecutionError(args, str(exc)) from exc
    if result.returncode != 0:
        raise ExecutionError(args, result.stderr.decode("utf-8", errors="replace"))
    paths: list[str] = []
    # raw bytes: file names need not be valid in any encoding
    for raw in result.stdout.splitlines():
        if not raw:
            continue
        line = os.fsdecode(raw)
        if pattern is not None and not pattern.search(line):
            continue
        paths.append(os.path.normpath(os.path.join(cwd, line)))
    logger.debug("git %s -> %d path(s)", args[0], len(paths))
    return paths
