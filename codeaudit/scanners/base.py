"""Generic rule-set scanner shared by every finding category."""

import re
from bisect import bisect_left
from collections.abc import Iterable

from codeaudit.files import is_in_scope
from codeaudit.models import Finding, FindingType, Rule, RuleError
from codeaudit.severity import adjust_severity

_NEWLINE = re.compile("\n")


def build_catalog(rules: Iterable[Rule]) -> tuple[Rule, ...]:
    """Freeze an ordered rule list, rejecting duplicate rule names."""
    catalog = tuple(rules)
    seen: set[str] = set()
    for rule in catalog:
        if rule.name in seen:
            raise RuleError(f"Duplicate rule name in catalog: {rule.name}")
        seen.add(rule.name)
    return catalog


class LineIndex:
    """Maps character offsets in a file to 1-based line numbers."""

    def __init__(self, content: str):
        self._newlines = [m.start() for m in _NEWLINE.finditer(content)]

    def line_of(self, offset: int) -> int:
        return bisect_left(self._newlines, offset) + 1


class RuleSetScanner:
    category: FindingType
    rules: tuple[Rule, ...] = ()

    @property
    def name(self) -> str:
        return self.category.value

    def in_scope(self, filename: str) -> bool:
        return is_in_scope(self.category, filename)

    def scan(self, filename: str, content: str) -> list[Finding]:
        if not self.in_scope(filename):
            return []

        findings: list[Finding] = []
        lines: LineIndex | None = None
        for rule in self.rules:
            severity, suffix = adjust_severity(self.category, filename, rule.severity)
            for match in rule.pattern.finditer(content):
                if lines is None:
                    lines = LineIndex(content)
                findings.append(
                    Finding(
                        type=self.category,
                        severity=severity,
                        file=filename,
                        line=lines.line_of(match.start()),
                        title=rule.name,
                        description=rule.description + suffix,
                        suggestion=rule.suggestion,
                    )
                )
        return findings
