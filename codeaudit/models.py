"""Data models for audit rules, findings and scan results."""

import re
from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return {
            Severity.LOW: 0,
            Severity.MEDIUM: 1,
            Severity.HIGH: 2,
            Severity.CRITICAL: 3,
        }[self]

    def __ge__(self, other: "Severity") -> bool:
        return self.rank >= other.rank

    def __gt__(self, other: "Severity") -> bool:
        return self.rank > other.rank

    def __le__(self, other: "Severity") -> bool:
        return self.rank <= other.rank

    def __lt__(self, other: "Severity") -> bool:
        return self.rank < other.rank


class FindingType(Enum):
    SECURITY = "security"
    LICENSE = "license"
    PII = "pii"
    AI_PATTERN = "ai-pattern"


class RuleError(ValueError):
    """Raised when a rule catalog contains an invalid definition."""


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern
    severity: Severity
    description: str
    suggestion: str | None = None

    @classmethod
    def compile(
        cls,
        name: str,
        source: str,
        severity: Severity,
        description: str,
        suggestion: str | None = None,
        flags: int = 0,
    ) -> "Rule":
        try:
            pattern = re.compile(source, flags)
        except re.error as exc:
            raise RuleError(f"Rule '{name}' has an invalid pattern: {exc}") from exc
        return cls(
            name=name,
            pattern=pattern,
            severity=severity,
            description=description,
            suggestion=suggestion,
        )


@dataclass(frozen=True)
class Finding:
    type: FindingType
    severity: Severity
    file: str
    line: int | None
    title: str
    description: str
    suggestion: str | None = None

    @property
    def location(self) -> str:
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "file": self.file,
            "line": self.line,
            "title": self.title,
            "description": self.description,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class ChangedFile:
    """A file from a diff source, as handed to the scanners."""

    filename: str
    content: str | None
    status: str = "modified"

    @property
    def scannable(self) -> bool:
        return self.status != "removed" and self.content is not None


def _zero_counts() -> dict[FindingType, int]:
    return {t: 0 for t in FindingType}


@dataclass
class ScanResult:
    findings: list[Finding] = field(default_factory=list)
    counts: dict[FindingType, int] = field(default_factory=_zero_counts)
    errors: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.findings)

    @property
    def security(self) -> int:
        return self.counts[FindingType.SECURITY]

    @property
    def license(self) -> int:
        return self.counts[FindingType.LICENSE]

    @property
    def pii(self) -> int:
        return self.counts[FindingType.PII]

    @property
    def ai_pattern(self) -> int:
        return self.counts[FindingType.AI_PATTERN]

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "counts": {t.value: n for t, n in self.counts.items()},
            "findings": [f.to_dict() for f in self.findings],
            "errors": list(self.errors),
        }
