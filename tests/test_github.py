"""Tests for the GitHub pull request integration."""

from unittest.mock import MagicMock

import pytest
import requests

from codeaudit.config import Config
from codeaudit.github import (
    COMMENT_MARKER,
    GitHubClient,
    GitHubError,
    action_outputs,
    scannable_pull_files,
    write_action_outputs,
)
from codeaudit.models import ChangedFile, Finding, FindingType, ScanResult, Severity


def _response(payload, status_code: int = 200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


def _client(*responses) -> tuple[GitHubClient, MagicMock]:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.request.side_effect = list(responses)
    return GitHubClient("t0ken", session=session), session


class TestGitHubClient:
    def test_auth_header(self):
        _, session = _client()
        assert session.headers["Authorization"] == "Bearer t0ken"

    def test_list_pull_files(self):
        client, session = _client(_response([
            {"filename": "app.ts", "status": "modified", "patch": "+eval(x)"},
            {"filename": "old.ts", "status": "removed"},
        ]))
        files = client.list_pull_files("acme/web", 7)
        assert files == [
            ChangedFile("app.ts", "+eval(x)", "modified"),
            ChangedFile("old.ts", None, "removed"),
        ]
        method, url = session.request.call_args.args
        assert method == "GET"
        assert url == "https://api.github.com/repos/acme/web/pulls/7/files"

    def test_pagination(self):
        page1 = [{"filename": f"f{i}.ts", "patch": "+x"} for i in range(100)]
        page2 = [{"filename": "last.ts", "patch": "+y"}]
        client, session = _client(_response(page1), _response(page2))
        files = client.list_pull_files("acme/web", 7)
        assert len(files) == 101
        assert session.request.call_count == 2
        assert session.request.call_args.kwargs["params"]["page"] == 2

    def test_update_existing_comment(self):
        client, session = _client(
            _response([{"id": 1, "body": "hi"}, {"id": 42, "body": f"{COMMENT_MARKER}\nold"}]),
            _response({}),
        )
        client.upsert_comment("acme/web", 7, "new body")
        method, url = session.request.call_args.args
        assert method == "PATCH"
        assert url.endswith("/repos/acme/web/issues/comments/42")
        assert session.request.call_args.kwargs["json"] == {"body": "new body"}

    def test_create_comment(self):
        client, session = _client(_response([{"id": 1, "body": None}]), _response({}))
        client.upsert_comment("acme/web", 7, "new body")
        method, url = session.request.call_args.args
        assert method == "POST"
        assert url.endswith("/repos/acme/web/issues/7/comments")

    def test_http_error(self):
        client, _ = _client(_response({"message": "Not Found"}, status_code=404))
        with pytest.raises(GitHubError, match="404"):
            client.list_pull_files("acme/web", 7)

    def test_connection_error(self):
        client, session = _client()
        session.request.side_effect = requests.ConnectionError("down")
        with pytest.raises(GitHubError, match="down"):
            client.list_pull_files("acme/web", 7)


class TestPullFiles:
    def test_scannable_pull_files(self):
        files = [
            ChangedFile("app.ts", "+x", "modified"),
            ChangedFile("old.ts", None, "removed"),
            ChangedFile("logo.png", None, "added"),
            ChangedFile("tests/a.ts", "+y", "added"),
        ]
        kept = scannable_pull_files(files, Config(exclude_patterns=("tests/*",)))
        assert [f.filename for f in kept] == ["app.ts"]


class TestActionOutputs:
    def _result(self):
        finding = Finding(FindingType.PII, Severity.CRITICAL, "a.json", 1, "ssn", "SSN")
        return ScanResult(
            findings=[finding],
            counts={FindingType.SECURITY: 0, FindingType.LICENSE: 0, FindingType.PII: 1, FindingType.AI_PATTERN: 0},
        )

    def test_outputs(self):
        assert action_outputs(self._result()) == {
            "findings-count": 1,
            "security-issues": 0,
            "license-violations": 0,
            "pii-leaks": 1,
            "ai-patterns": 0,
        }

    def test_write_to_file(self, tmp_path):
        out = tmp_path / "github_output"
        assert write_action_outputs(self._result(), str(out)) is True
        lines = out.read_text().splitlines()
        assert "findings-count=1" in lines
        assert "pii-leaks=1" in lines

    def test_outside_actions(self, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        assert write_action_outputs(self._result()) is False
