from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, cast


class _TomlLoader(Protocol):
    def loads(self, s: str, /, *, parse_float: Any = ...) -> dict[str, Any]: ...


def _loader() -> _TomlLoader:
    try:
        import tomllib

        return cast(_TomlLoader, tomllib)
    except ModuleNotFoundError:  # pragma: no cover - only used on Python < 3.11
        import tomli

        return cast(_TomlLoader, tomli)


def loads(text: str) -> dict[str, Any]:
    return _loader().loads(text)


def load_file(path: Path) -> dict[str, Any]:
    return loads(path.read_text(encoding="utf-8"))
