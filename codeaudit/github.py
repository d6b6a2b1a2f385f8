"""GitHub pull request integration: changed files, report comment, Action outputs."""

import logging
import os
from pathlib import Path

import requests

from codeaudit.config import Config
from codeaudit.models import ChangedFile, ScanResult
from codeaudit.sources import is_excluded

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
COMMENT_MARKER = "<!-- ai-code-audit -->"
PER_PAGE = 100


class GitHubError(Exception):
    """Raised when the GitHub API cannot be reached or rejects a request."""


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
        timeout: int = 30,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "codeaudit",
        })

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.api_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise GitHubError(f"{method} {path} failed: {exc}") from exc
        if resp.status_code >= 400:
            raise GitHubError(f"{method} {path} returned HTTP {resp.status_code}")
        return resp.json()

    def _paginate(self, path: str) -> list[dict]:
        items: list[dict] = []
        page = 1
        while True:
            batch = self._request("GET", path, params={"per_page": PER_PAGE, "page": page})
            items.extend(batch)
            if len(batch) < PER_PAGE:
                return items
            page += 1

    def list_pull_files(self, repo: str, number: int) -> list[ChangedFile]:
        """Files changed in a pull request; content is the unified diff patch."""
        files = [
            ChangedFile(
                filename=item["filename"],
                content=item.get("patch"),
                status=item.get("status", "modified"),
            )
            for item in self._paginate(f"/repos/{repo}/pulls/{number}/files")
        ]
        logger.info("Found %d changed files in %s#%d", len(files), repo, number)
        return files

    def upsert_comment(self, repo: str, number: int, body: str) -> None:
        """Update the existing audit comment on the pull request, or create one."""
        comments = self._paginate(f"/repos/{repo}/issues/{number}/comments")
        existing = next((c for c in comments if COMMENT_MARKER in (c.get("body") or "")), None)
        if existing:
            self._request("PATCH", f"/repos/{repo}/issues/comments/{existing['id']}", json={"body": body})
        else:
            self._request("POST", f"/repos/{repo}/issues/{number}/comments", json={"body": body})


def scannable_pull_files(files: list[ChangedFile], config: Config) -> list[ChangedFile]:
    return [f for f in files if f.scannable and not is_excluded(f.filename, config)]


def action_outputs(result: ScanResult) -> dict[str, int]:
    return {
        "findings-count": result.total,
        "security-issues": result.security,
        "license-violations": result.license,
        "pii-leaks": result.pii,
        "ai-patterns": result.ai_pattern,
    }


def write_action_outputs(result: ScanResult, path: str | None = None) -> bool:
    """Append step outputs to $GITHUB_OUTPUT. Returns False outside of Actions."""
    path = path or os.environ.get("GITHUB_OUTPUT")
    if not path:
        return False
    with Path(path).open("a") as fh:
        for key, value in action_outputs(result).items():
            fh.write(f"{key}={value}\n")
    return True
