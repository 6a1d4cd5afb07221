from __future__ import annotations

from collections.abc import Sequence


class ChangedFilesError(Exception):
    """Base exception for changed-files."""


class ConfigError(ChangedFilesError):
    """Raised when configuration is invalid."""


class PatternError(ChangedFilesError):
    """Raised when the --filter regex does not compile."""


class ExecutionError(ChangedFilesError):
    """Raised when a git query exits non-zero or cannot be started."""

    def __init__(self, args: Sequence[str], stderr: str) -> None:
        self.args_list = tuple(args)
        self.stderr = stderr
        super().__init__(f"run cmd error args {' '.join(self.args_list)}, error: {stderr}")
