"""changed-files package."""

from changed_files.core.config import BuildInfo, ChangedFilesConfig, Options
from changed_files.core.errors import ChangedFilesError, ExecutionError, PatternError
from changed_files.core.resolver import ChangeSetResolver, resolve

__all__ = [
    "BuildInfo",
    "ChangeSetResolver",
    "ChangedFilesConfig",
    "ChangedFilesError",
    "ExecutionError",
    "Options",
    "PatternError",
    "resolve",
]
