import os
import subprocess
import sys
from pathlib import Path


def _env() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(Path(__file__).resolve().parents[1] / "src")
    return env


def test_cli_module_version():
    cmd = [sys.executable, "-m", "changed_files", "--version"]
    result = subprocess.run(cmd, env=_env(), capture_output=True, text=True)
    assert result.returncode == 0
    assert result.stdout.strip()


def test_cli_module_outside_repo(tmp_path: Path):
    plain = tmp_path / "plain"
    plain.mkdir()
    env = _env()
    env["GIT_CEILING_DIRECTORIES"] = str(tmp_path)
    cmd = [sys.executable, "-m", "changed_files", "jest"]
    result = subprocess.run(cmd, env=env, cwd=plain, capture_output=True, text=True)
    assert result.returncode != 0
    assert result.stdout == ""
