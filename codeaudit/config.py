"""Configuration file support for CodeAudit (.codeaudit.yml)."""

from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from codeaudit.models import FindingType, Severity

DEFAULT_CONFIG_NAME = ".codeaudit.yml"

_BOOL_KEYS = (
    "scan_security",
    "scan_licenses",
    "scan_pii",
    "scan_ai_patterns",
    "fail_on_findings",
    "skip_generated",
)


@dataclass(frozen=True)
class Config:
    """CodeAudit configuration loaded from .codeaudit.yml."""

    scan_security: bool = True
    scan_licenses: bool = True
    scan_pii: bool = True
    scan_ai_patterns: bool = True
    severity_threshold: str = "low"
    fail_on_findings: bool = False
    exclude_patterns: tuple[str, ...] = field(default_factory=tuple)
    max_file_size: int = 1_000_000
    skip_generated: bool = False

    @property
    def min_severity(self) -> Severity:
        return Severity(self.severity_threshold)

    @property
    def enabled_types(self) -> tuple[FindingType, ...]:
        flags = {
            FindingType.AI_PATTERN: self.scan_ai_patterns,
            FindingType.SECURITY: self.scan_security,
            FindingType.LICENSE: self.scan_licenses,
            FindingType.PII: self.scan_pii,
        }
        return tuple(t for t, enabled in flags.items() if enabled)

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with the given non-None values applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return _parse_config(values, base=self)


def load_config(config_path: str | None = None, project_root: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Priority: explicit --config path > .codeaudit.yml in project root > defaults.
    """
    path = None

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    elif project_root:
        candidate = Path(project_root) / DEFAULT_CONFIG_NAME
        if candidate.exists():
            path = candidate

    if path is None:
        return Config()

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must be a YAML mapping, got {type(raw).__name__}")

    return _parse_config(raw)


def _parse_config(raw: dict, base: Config | None = None) -> Config:
    """Validate a raw mapping and apply it on top of ``base``."""
    values: dict = {}

    for key in _BOOL_KEYS:
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ValueError(f"{key} must be a boolean")
            values[key] = raw[key]

    if "severity_threshold" in raw:
        sev = raw["severity_threshold"]
        valid = {s.value for s in Severity}
        if not isinstance(sev, str) or sev.lower() not in valid:
            raise ValueError(f"severity_threshold must be one of {sorted(valid)}, got '{sev}'")
        values["severity_threshold"] = sev.lower()

    if "exclude_patterns" in raw:
        patterns = raw["exclude_patterns"]
        if not isinstance(patterns, (list, tuple)):
            raise ValueError("exclude_patterns must be a list")
        values["exclude_patterns"] = tuple(str(p) for p in patterns)

    if "max_file_size" in raw:
        val = raw["max_file_size"]
        if not isinstance(val, int) or isinstance(val, bool) or val <= 0:
            raise ValueError("max_file_size must be a positive integer")
        values["max_file_size"] = val

    return replace(base or Config(), **values)
