"""Scanner registry for CodeAudit.

``SCANNERS`` is ordered: this is the order findings appear in for each file.
"""

from codeaudit.models import FindingType
from codeaudit.scanners.ai_patterns import AIPatternScanner
from codeaudit.scanners.base import LineIndex, RuleSetScanner, build_catalog
from codeaudit.scanners.license import LicenseScanner
from codeaudit.scanners.pii import PIIScanner
from codeaudit.scanners.security import SecurityScanner

SCANNERS: dict[FindingType, type[RuleSetScanner]] = {
    FindingType.AI_PATTERN: AIPatternScanner,
    FindingType.SECURITY: SecurityScanner,
    FindingType.LICENSE: LicenseScanner,
    FindingType.PII: PIIScanner,
}

__all__ = [
    "RuleSetScanner",
    "LineIndex",
    "build_catalog",
    "AIPatternScanner",
    "SecurityScanner",
    "LicenseScanner",
    "PIIScanner",
    "SCANNERS",
]
