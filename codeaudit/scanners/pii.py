"""Personal data and credential leak detection."""

import re

from codeaudit.models import FindingType, Rule, Severity
from codeaudit.scanners.base import RuleSetScanner, build_catalog

PII_PATTERNS = build_catalog([
    Rule.compile(
        "ssn",
        r"\b\d{3}[- ]?\d{2}[- ]?\d{4}\b",
        Severity.CRITICAL,
        "Potential Social Security Number detected",
        "Remove SSN from code. Use secure storage with encryption if needed.",
    ),
    # Visa, Mastercard, Amex, Discover
    Rule.compile(
        "credit-card",
        r"\b(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|3[47][0-9]{13}|6(?:011|5[0-9]{2})[0-9]{12})\b",
        Severity.CRITICAL,
        "Potential credit card number detected",
        "Never store credit card numbers in code. Use a payment processor.",
    ),
    Rule.compile(
        "aws-access-key",
        r"\b(A3T[A-Z0-9]|AKIA|AGPA|AIDA|AROA|AIPA|ANPA|ANVA|ASIA)[A-Z0-9]{16}\b",
        Severity.CRITICAL,
        "Potential AWS Access Key ID detected",
        "Use environment variables or AWS Secrets Manager. Rotate this key immediately if real.",
    ),
    Rule.compile(
        "aws-secret-key",
        r"\b[A-Za-z0-9/+=]{40}\b",
        Severity.HIGH,
        "Potential AWS Secret Access Key detected",
        "Never commit AWS secrets. Use IAM roles or environment variables.",
    ),
    Rule.compile(
        "generic-api-key",
        r"""['"`](?:api[_-]?key|apikey|api[_-]?secret|access[_-]?token)['"`:=\s]+['"`]?[A-Za-z0-9_\-]{20,}['"`]?""",
        Severity.CRITICAL,
        "Potential API key or token detected",
        "Use environment variables or a secrets manager for API keys.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "github-token",
        r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{36,}\b",
        Severity.CRITICAL,
        "GitHub Personal Access Token detected",
        "Revoke this token immediately and use environment variables.",
    ),
    Rule.compile(
        "slack-token",
        r"xox[baprs]-[0-9]{10,13}-[0-9]{10,13}-[a-zA-Z0-9]{24}",
        Severity.CRITICAL,
        "Slack token detected",
        "Revoke this token and use environment variables.",
    ),
    Rule.compile(
        "private-key",
        r"-----BEGIN\s+(?:RSA|DSA|EC|OPENSSH|PGP)?\s*PRIVATE\s+KEY-----",
        Severity.CRITICAL,
        "Private key detected",
        "Never commit private keys. Use a secrets manager or key vault.",
    ),
    Rule.compile(
        "db-connection-string",
        r"(?:mongodb|postgres|mysql|redis|amqp)://[^:\s]+:[^@\s]+@[^\s]+",
        Severity.CRITICAL,
        "Database connection string with credentials detected",
        "Use environment variables for database credentials.",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "email-pii",
        r"""['"`][a-zA-Z0-9._%+-]+@(?!example\.com|test\.com|localhost)[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}['"`]""",
        Severity.MEDIUM,
        "Email address detected in string literal",
        "Ensure this is not real personal data. Use example.com for test emails.",
    ),
    # US format
    Rule.compile(
        "phone-number",
        r"\b(?:\+1[-.\s]?)?\(?[2-9][0-9]{2}\)?[-.\s]?[2-9][0-9]{2}[-.\s]?[0-9]{4}\b",
        Severity.MEDIUM,
        "Potential phone number detected",
        "Ensure this is not real personal data. Use fake numbers for testing.",
    ),
    Rule.compile(
        "jwt-token",
        r"eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+",
        Severity.HIGH,
        "JWT token detected in code",
        "Do not hardcode JWT tokens. Use dynamic token generation.",
    ),
    Rule.compile(
        "bearer-token",
        r"""['"](Bearer\s+)[A-Za-z0-9_\-.]+['"]""",
        Severity.HIGH,
        "Bearer token detected in string",
        "Do not hardcode authentication tokens.",
    ),
    # Private ranges are excluded.
    Rule.compile(
        "public-ip",
        r"\b(?!(?:10|127|172\.(?:1[6-9]|2[0-9]|3[01])|192\.168)\.)[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\b",
        Severity.LOW,
        "Public IP address detected",
        "Ensure this IP address is not sensitive infrastructure.",
    ),
])


class PIIScanner(RuleSetScanner):
    category = FindingType.PII
    rules = PII_PATTERNS
