"""Context-sensitive severity adjustment applied after a rule matches."""

from codeaudit.files import is_test_file
from codeaudit.models import FindingType, Severity

TEST_FILE_SUFFIX = " (in test file)"


def adjust_severity(
    category: FindingType, filename: str, severity: Severity
) -> tuple[Severity, str]:
    """Return the effective severity and a description suffix for a match.

    PII matches inside test, mock, fixture or example files are annotated,
    and critical ones are lowered to high. Every other category passes
    through untouched.
    """
    if category is not FindingType.PII or not is_test_file(filename):
        return severity, ""
    if severity is Severity.CRITICAL:
        return Severity.HIGH, TEST_FILE_SUFFIX
    return severity, TEST_FILE_SUFFIX
