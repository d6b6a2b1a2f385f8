"""Security vulnerability patterns: injection, XSS, hardcoded credentials, weak crypto."""

import re

from codeaudit.models import FindingType, Rule, Severity
from codeaudit.scanners.base import RuleSetScanner, build_catalog

_SQL_KEYWORDS = r"(?:SELECT|INSERT|UPDATE|DELETE|FROM|WHERE)"
_SQL_STATEMENT = r"(?:SELECT\b[^\n]*?\bFROM|INSERT\s+INTO|UPDATE\b[^\n]*?\bSET|DELETE\s+FROM)"

SECURITY_PATTERNS = build_catalog([
    Rule.compile(
        "sql-injection",
        rf"""(?:\$\{{.*\}}|['"`]\s*\+\s*\w+\s*\+\s*['"`]).*{_SQL_KEYWORDS}"""
        rf"""|\b{_SQL_STATEMENT}\b[^\n]*?(?:\$\{{|['"`]\s*\+\s*\w)[^\n]*""",
        Severity.CRITICAL,
        "Potential SQL injection: user input may be directly concatenated into SQL query",
        "Use parameterized queries or an ORM instead of string concatenation",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "command-injection",
        r"""exec\s*\(\s*[`'"].*\$\{|child_process\.exec\s*\([^)]*\+"""
        r"""|(?:os\.system|os\.popen|subprocess\.\w+)\s*\(\s*f['"]""",
        Severity.CRITICAL,
        "Potential command injection: user input may be passed to shell execution",
        "Use execFile with an array of arguments instead of exec with string interpolation",
    ),
    Rule.compile(
        "xss-innerhtml",
        r"""\.innerHTML\s*=(?!=)\s*[^\s"'`]""",
        Severity.HIGH,
        "Potential XSS: innerHTML assignment with dynamic content",
        "Use textContent for plain text, or sanitize HTML with DOMPurify",
    ),
    Rule.compile(
        "xss-dangerous-html",
        r"dangerouslySetInnerHTML\s*=\s*\{\s*\{\s*__html:\s*[^}]+\}\s*\}",
        Severity.HIGH,
        "dangerouslySetInnerHTML used - ensure content is sanitized",
        "Sanitize HTML with DOMPurify before using dangerouslySetInnerHTML",
    ),
    Rule.compile(
        "eval-usage",
        r"\beval\s*\(|\bnew\s+Function\s*\(",
        Severity.CRITICAL,
        "eval() usage detected - serious security risk",
        "Avoid eval(). Use JSON.parse() for JSON, or Function constructor if absolutely needed",
    ),
    Rule.compile(
        "hardcoded-password",
        r"""(password|passwd|pwd|secret)\s*[:=]\s*['"`][^'"`]{4,}['"`]""",
        Severity.CRITICAL,
        "Potential hardcoded password or secret",
        "Use environment variables or a secrets manager",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "hardcoded-api-key",
        r"""(api[_-]?key|apikey|api[_-]?secret)\s*[:=]\s*['"`][A-Za-z0-9_\-]{16,}['"`]""",
        Severity.CRITICAL,
        "Potential hardcoded API key",
        "Use environment variables or a secrets manager",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "insecure-http",
        r"""['"`]http://(?!localhost|127\.0\.0\.1)[^'"`]+['"`]""",
        Severity.MEDIUM,
        "Insecure HTTP URL (not HTTPS)",
        "Use HTTPS for external URLs",
    ),
    Rule.compile(
        "jwt-no-verify",
        r"jwt\.decode\s*\(",
        Severity.HIGH,
        "JWT decoded without verification",
        "Use jwt.verify() to validate the signature",
    ),
    Rule.compile(
        "ssl-disabled",
        r"""rejectUnauthorized\s*:\s*false|NODE_TLS_REJECT_UNAUTHORIZED\s*=\s*['"`]?0['"`]?"""
        r"""|\bverify\s*=\s*False\b""",
        Severity.HIGH,
        "SSL/TLS certificate verification disabled",
        "Enable certificate verification in production",
    ),
    Rule.compile(
        "weak-crypto",
        r"""createHash\s*\(\s*['"`](md5|sha1)['"`]\s*\)|hashlib\.(md5|sha1)\s*\(""",
        Severity.MEDIUM,
        "Weak cryptographic hash function (MD5 or SHA1)",
        "Use SHA256 or stronger for security-sensitive operations",
    ),
    Rule.compile(
        "insecure-random",
        r"Math\.random\s*\(\s*\).*(?:token|key|secret|password|id|uuid)",
        Severity.HIGH,
        "Math.random() used for potentially security-sensitive value",
        "Use crypto.randomBytes() or crypto.randomUUID() for secure random values",
        flags=re.IGNORECASE,
    ),
])


class SecurityScanner(RuleSetScanner):
    category = FindingType.SECURITY
    rules = SECURITY_PATTERNS
