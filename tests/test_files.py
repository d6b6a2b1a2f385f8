"""Tests for filename classification."""

import pytest

from codeaudit.files import (
    basename,
    file_extension,
    is_code_file,
    is_generated_file,
    is_in_scope,
    is_license_relevant,
    is_test_file,
    should_skip_pii,
)
from codeaudit.models import FindingType


class TestExtension:
    def test_lower_cased(self):
        assert file_extension("src/App.TSX") == "tsx"

    def test_no_dot(self):
        assert file_extension("Makefile") == ""
        assert not is_code_file("Makefile")

    def test_basename(self):
        assert basename("a/b/LICENSE") == "LICENSE"
        assert basename("LICENSE") == "LICENSE"


class TestCodeFile:
    @pytest.mark.parametrize("name", ["app.ts", "src/main.py", "lib.rs", "Widget.vue", "x.CPP"])
    def test_code_files(self, name):
        assert is_code_file(name)

    @pytest.mark.parametrize("name", ["README.md", "data.json", "logo.png", "ts"])
    def test_non_code_files(self, name):
        assert not is_code_file(name)


class TestLicenseRelevant:
    @pytest.mark.parametrize(
        "name",
        ["LICENSE", "docs/COPYING", "notes.md", "config.yaml", "Gemfile", "readme", "src/app.py"],
    )
    def test_relevant(self, name):
        assert is_license_relevant(name)

    @pytest.mark.parametrize("name", ["logo.png", "Makefile", "build/app.bin"])
    def test_not_relevant(self, name):
        assert not is_license_relevant(name)


class TestPIISkip:
    @pytest.mark.parametrize(
        "name",
        [
            "node_modules/pkg/index.js",
            "vendor/lib.go",
            "dist/app.min.js",
            "yarn.lock",
            "package-lock.json",
            "assets/logo.png",
            "fonts/inter.woff2",
        ],
    )
    def test_skipped(self, name):
        assert should_skip_pii(name)

    @pytest.mark.parametrize("name", ["src/app.ts", "config.json", "LICENSE", ".env"])
    def test_scanned(self, name):
        assert not should_skip_pii(name)


class TestTestFile:
    @pytest.mark.parametrize(
        "name",
        ["user.test.ts", "api.SPEC.js", "db.mock.py", "config.example.json", "src/__tests__/a.js", "__mocks__/x.ts"],
    )
    def test_test_paths(self, name):
        assert is_test_file(name)

    @pytest.mark.parametrize("name", ["latest.ts", "tests/user.ts", "src/app.ts"])
    def test_regular_paths(self, name):
        assert not is_test_file(name)


class TestGenerated:
    @pytest.mark.parametrize("name", ["dist/app.js", "web/build/main.js", "package-lock.json", "go.sum", "a.min.css"])
    def test_generated(self, name):
        assert is_generated_file(name)

    def test_source_file(self):
        assert not is_generated_file("src/app.ts")


class TestInScope:
    def test_code_only_categories(self):
        for category in (FindingType.SECURITY, FindingType.AI_PATTERN):
            assert is_in_scope(category, "app.ts")
            assert not is_in_scope(category, "data.json")

    def test_license(self):
        assert is_in_scope(FindingType.LICENSE, "data.json")
        assert not is_in_scope(FindingType.LICENSE, "logo.png")

    def test_pii(self):
        assert is_in_scope(FindingType.PII, "data.json")
        assert not is_in_scope(FindingType.PII, "node_modules/x.js")
