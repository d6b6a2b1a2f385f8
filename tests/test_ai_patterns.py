"""Tests for the AI-generated code pattern scanner."""

import textwrap

from codeaudit.models import FindingType, Severity
from codeaudit.scanners.ai_patterns import AIPatternScanner


def _titles(filename: str, content: str) -> list[str]:
    return [f.title for f in AIPatternScanner().scan(filename, content)]


class TestAIPatternScanner:
    def test_verbose_comment(self):
        assert _titles("app.js", "// " + "x" * 120) == ["verbose-comment"]

    def test_short_comment_ok(self):
        assert _titles("app.js", "// handles retries\nretry();") == []

    def test_obvious_comment(self):
        findings = AIPatternScanner().scan("app.js", "let count = 0;\n// increment the counter\ncount++;")
        assert [f.title for f in findings] == ["obvious-comment"]
        assert findings[0].line == 2
        assert findings[0].severity == Severity.LOW

    def test_placeholder_value(self):
        findings = AIPatternScanner().scan("config.ts", 'const key = "your_api_key";')
        assert [f.title for f in findings] == ["placeholder-value"]
        assert findings[0].severity == Severity.MEDIUM
        assert findings[0].type is FindingType.AI_PATTERN

    def test_generic_naming(self):
        assert _titles("app.py", "data1 = load()") == ["generic-naming"]

    def test_unnecessary_async(self):
        content = "async function getUser(id) { return db.find(id); }"
        assert _titles("user.js", content) == ["unnecessary-async"]

    def test_async_with_await_ok(self):
        content = textwrap.dedent("""\
            async function getUser(id) {
              const user = await db.find(id);
              return user;
            }
        """)
        assert _titles("user.js", content) == []

    def test_deprecated_console(self):
        assert _titles("debug.js", "console.table(rows);") == ["deprecated-console"]
        assert _titles("debug.js", "console.log(rows);") == []

    def test_unhandled_fetch(self):
        findings = AIPatternScanner().scan("api.js", "fetch(url).then(r => r.json());")
        assert [f.title for f in findings] == ["unhandled-fetch"]
        assert findings[0].severity == Severity.MEDIUM

    def test_non_code_file_skipped(self):
        assert AIPatternScanner().scan("notes.md", "// " + "x" * 120) == []
