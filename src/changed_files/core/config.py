from __future__ import annotations

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, cast

from changed_files._compat.toml import load_file

DIST_NAME = "changed-files"


@dataclass(frozen=True, slots=True)
class Options:
    last_commit: bool = False
    with_ancestor: bool = False
    changed_since: str | None = None

    @property
    def is_default(self) -> bool:
        return not (self.last_commit or self.with_ancestor or self.changed_since)


@dataclass(frozen=True, slots=True)
class ChangedFilesConfig:
    options: Options = field(default_factory=Options)
    filter: str | None = None
    folder: bool = False
    command: str = ""
    git: str = "git"


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Release metadata shown by ``--version``.

    ``commit``, ``date`` and ``built_by`` are filled in by release builds;
    source checkouts leave them empty.
    """

    version: str = "master"
    commit: str = ""
    date: str = ""
    built_by: str = ""

    def describe(self) -> str:
        lines = [self.version]
        if self.commit:
            lines.append(f"commit: {self.commit}")
        if self.date:
            lines.append(f"built at: {self.date}")
        if self.built_by:
            lines.append(f"built by: {self.built_by}")
        return "\n".join(lines)

    @classmethod
    def current(cls, commit: str = "", date: str = "", built_by: str = "") -> BuildInfo:
        return cls(version=_release_version(), commit=commit, date=date, built_by=built_by)


def _release_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        pyproject = Path(__file__).resolve().parents[3] / "pyproject.toml"
        if pyproject.exists():
            project = load_file(pyproject).get("project")
            if isinstance(project, dict):
                project_dict = cast(dict[str, Any], project)
                project_version = project_dict.get("version")
                if isinstance(project_version, str):
                    return project_version
        return "master"
