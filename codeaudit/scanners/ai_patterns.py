"""Detection of code smells typical of machine-generated code."""

import re

from codeaudit.models import FindingType, Rule, Severity
from codeaudit.scanners.base import RuleSetScanner, build_catalog

AI_PATTERNS = build_catalog([
    Rule.compile(
        "verbose-comment",
        r"//\s*.{100,}",
        Severity.LOW,
        "Unusually long single-line comment (common in AI-generated code)",
        "Consider if this comment is necessary or can be simplified",
    ),
    Rule.compile(
        "obvious-comment",
        r"//\s*(increment|decrement|initialize|set|get|return|loop|iterate)\s+(the\s+)?\w+",
        Severity.LOW,
        "Comment explaining obvious code (AI often over-documents)",
        "Remove comments that simply restate what the code does",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "placeholder-value",
        r"""(["'`])(example|placeholder|your[_-]?\w+|insert[_-]?\w+|TODO|FIXME|XXX)\1""",
        Severity.MEDIUM,
        "Placeholder value that may have been left in by AI",
        "Replace with actual value or remove",
        flags=re.IGNORECASE,
    ),
    Rule.compile(
        "generic-naming",
        r"\b(data|result|response|value|item|element|temp|tmp|obj|arr)\d+\b",
        Severity.LOW,
        "Generic numbered variable name (common AI pattern)",
        "Use more descriptive variable names",
    ),
    Rule.compile(
        "unnecessary-async",
        r"async\s+(?:function\s+)?\w+\s*\([^)]*\)\s*\{\s*return\s+[^;]+;\s*\}",
        Severity.LOW,
        "Async function that may not need to be async",
        "Remove async if no await is used inside",
    ),
    Rule.compile(
        "deprecated-console",
        r"console\.(debug|assert|count|countReset|dir|dirxml|group|groupCollapsed|groupEnd"
        r"|profile|profileEnd|table|time|timeEnd|timeLog|timeStamp|trace)\(",
        Severity.LOW,
        "Console method that may not be appropriate for production",
        "Consider using a proper logging library",
    ),
    Rule.compile(
        "unhandled-fetch",
        r"fetch\([^)]+\)\s*\.then\(",
        Severity.MEDIUM,
        "Fetch without apparent error handling",
        "Add .catch() or use try/catch with async/await",
    ),
])


class AIPatternScanner(RuleSetScanner):
    category = FindingType.AI_PATTERN
    rules = AI_PATTERNS
