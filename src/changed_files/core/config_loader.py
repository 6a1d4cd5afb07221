from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from changed_files._compat.toml import load_file
from changed_files.core.config import ChangedFilesConfig
from changed_files.core.errors import ConfigError

TOOL_SECTION = "changed-files"


def load_config(root: Path, overrides: dict[str, Any] | None = None) -> ChangedFilesConfig:
    overrides = overrides or {}
    config = ChangedFilesConfig()
    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        try:
            data = load_file(pyproject)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"cannot read {pyproject}: {exc}") from exc
        tool = data.get("tool", {})
        tool_cfg = tool.get(TOOL_SECTION, {}) if isinstance(tool, dict) else {}
        if not isinstance(tool_cfg, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")
        config = _apply_config(config, tool_cfg)
    config = _apply_config(config, overrides)
    return config


def _expect(cfg: dict[str, Any], key: str, kind: type) -> Any:
    value = cfg[key]
    # exact match: bool is a subclass of int
    if type(value) is not kind:
        raise ConfigError(f"{key} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _apply_config(config: ChangedFilesConfig, cfg: dict[str, Any]) -> ChangedFilesConfig:
    if not cfg:
        return config
    options = config.options
    if "last_commit" in cfg:
        options = replace(options, last_commit=_expect(cfg, "last_commit", bool))
    if "with_ancestor" in cfg:
        options = replace(options, with_ancestor=_expect(cfg, "with_ancestor", bool))
    if "changed_since" in cfg:
        options = replace(options, changed_since=_expect(cfg, "changed_since", str) or None)
    config = replace(config, options=options)
    if "filter" in cfg:
        config = replace(config, filter=_expect(cfg, "filter", str) or None)
    if "folder" in cfg:
        config = replace(config, folder=_expect(cfg, "folder", bool))
    if "command" in cfg:
        config = replace(config, command=_expect(cfg, "command", str))
    if "git" in cfg:
        git = _expect(cfg, "git", str)
        if not git:
            raise ConfigError("git must not be empty")
        config = replace(config, git=git)
    return config
