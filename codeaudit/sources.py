"""Collect changed files from the local filesystem or a git working tree."""

import fnmatch
import logging
import os
import subprocess
from pathlib import Path

from codeaudit.config import Config
from codeaudit.files import is_generated_file
from codeaudit.models import ChangedFile

logger = logging.getLogger(__name__)

SKIP_DIRS = {".git", "__pycache__", "node_modules", ".venv", "venv", ".tox", ".eggs"}


class SourceError(Exception):
    """Raised when changed files cannot be collected."""


def is_excluded(filename: str, config: Config) -> bool:
    if config.skip_generated and is_generated_file(filename):
        return True
    return any(fnmatch.fnmatch(filename, pattern) for pattern in config.exclude_patterns)


def _read(path: Path, display: str, status: str, config: Config) -> ChangedFile | None:
    try:
        size = path.stat().st_size
        if size > config.max_file_size:
            logger.info("Skipping %s: %d bytes exceeds max_file_size", display, size)
            return None
        content = path.read_text(errors="ignore")
    except OSError as exc:
        logger.warning("Could not read %s: %s", display, exc)
        return None
    return ChangedFile(filename=display, content=content, status=status)


def load_paths(paths: list[str], config: Config) -> list[ChangedFile]:
    """Treat every file under ``paths`` as newly added."""
    files: list[ChangedFile] = []
    for target in paths:
        root = Path(target)
        if root.is_file():
            candidates = [(root, root.as_posix())]
        else:
            candidates = [(p, p.relative_to(root).as_posix()) for p in _walk_files(root)]
        for path, display in candidates:
            if is_excluded(display, config):
                continue
            changed = _read(path, display, "added", config)
            if changed is not None:
                files.append(changed)
    return files


def _walk_files(root: Path):
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for fname in sorted(filenames):
            yield Path(dirpath) / fname


_GIT_STATUSES = {
    "A": "added",
    "M": "modified",
    "D": "removed",
    "R": "renamed",
    "C": "copied",
    "T": "changed",
}


def parse_name_status(output: str) -> list[tuple[str, str]]:
    """Parse ``git diff --name-status`` output into (status, path) pairs."""
    entries: list[tuple[str, str]] = []
    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        code = parts[0][:1]
        # Renames and copies list the old path first.
        entries.append((_GIT_STATUSES.get(code, "modified"), parts[-1]))
    return entries


def load_git_diff(repo: str, base: str, config: Config) -> list[ChangedFile]:
    """Changed files between ``base`` and the working tree of ``repo``."""
    repo_path = Path(repo)
    try:
        proc = subprocess.run(
            ["git", "diff", "--name-status", "--no-color", base],
            cwd=str(repo_path),
            capture_output=True,
            text=True,
            timeout=60,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError) as exc:
        raise SourceError(f"Could not run git diff: {exc}") from exc

    if proc.returncode != 0:
        raise SourceError(f"git diff failed: {proc.stderr.strip()}")

    files: list[ChangedFile] = []
    for status, filename in parse_name_status(proc.stdout):
        if status == "removed" or is_excluded(filename, config):
            continue
        changed = _read(repo_path / filename, filename, status, config)
        if changed is not None:
            files.append(changed)
    logger.info("Collected %d changed file(s) against %s", len(files), base)
    return files
