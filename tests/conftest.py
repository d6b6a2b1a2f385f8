"""Shared fixtures for CodeAudit tests."""

import subprocess
import textwrap
from pathlib import Path

import pytest

from codeaudit.models import ChangedFile


@pytest.fixture
def changed_file():
    """Build a ChangedFile with dedented content."""

    def _create(filename: str, content: str, status: str = "modified") -> ChangedFile:
        return ChangedFile(filename=filename, content=textwrap.dedent(content), status=status)

    return _create


@pytest.fixture
def tmp_dir_with_files(tmp_path: Path):
    """Create a temp directory with multiple files."""

    def _create(files: dict[str, str]) -> Path:
        for name, content in files.items():
            p = tmp_path / name
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(textwrap.dedent(content))
        return tmp_path

    return _create


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=str(repo), capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path):
    """A git repo with one commit and a modified, an added and a deleted file."""
    _git(tmp_path, "init")
    _git(tmp_path, "config", "user.email", "dev@example.com")
    _git(tmp_path, "config", "user.name", "Dev")

    (tmp_path / "app.ts").write_text("const x = 1;\n")
    (tmp_path / "old.ts").write_text("const y = 2;\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "initial")

    (tmp_path / "app.ts").write_text('const password = "abcd1234";\n')
    (tmp_path / "new.json").write_text('{"ssn": "123-45-6789"}\n')
    _git(tmp_path, "add", "new.json")
    (tmp_path / "old.ts").unlink()

    return tmp_path
