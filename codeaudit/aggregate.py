"""Run the enabled scanners over a set of changed files and summarize the findings."""

import logging
from collections.abc import Iterable

from codeaudit.config import Config
from codeaudit.models import ChangedFile, Finding, FindingType, ScanResult, Severity
from codeaudit.scanners import SCANNERS, RuleSetScanner

logger = logging.getLogger(__name__)


def filter_by_severity(findings: Iterable[Finding], min_severity: Severity) -> list[Finding]:
    return [f for f in findings if f.severity >= min_severity]


def count_by_type(findings: Iterable[Finding]) -> dict[FindingType, int]:
    counts = {t: 0 for t in FindingType}
    for f in findings:
        counts[f.type] += 1
    return counts


def scan_file(changed: ChangedFile, scanners: list[RuleSetScanner]) -> list[Finding]:
    findings: list[Finding] = []
    for scanner in scanners:
        findings.extend(scanner.scan(changed.filename, changed.content))
    return findings


def aggregate(files: Iterable[ChangedFile], config: Config) -> ScanResult:
    """Scan every file with the enabled scanners and build a filtered result.

    Findings are ordered by file, then scanner (AI pattern, security,
    license, PII), then rule, then position in the file. Only findings at
    or above ``config.min_severity`` are kept and counted.

    A file whose scan raises ``RecursionError`` or ``MemoryError`` is
    dropped and reported in ``errors``. Slow regex backtracking raises
    neither; its cost is bounded only by the host's ``max_file_size``.
    """
    scanners = [SCANNERS[t]() for t in SCANNERS if t in config.enabled_types]
    collected: list[Finding] = []
    errors: list[str] = []

    for changed in files:
        if not changed.scannable:
            continue
        try:
            collected.extend(scan_file(changed, scanners))
        except (RecursionError, MemoryError) as exc:
            message = f"{changed.filename}: scan aborted ({type(exc).__name__})"
            logger.warning(message)
            errors.append(message)

    findings = filter_by_severity(collected, config.min_severity)
    logger.debug("%d of %d findings at or above %s", len(findings), len(collected),
                 config.min_severity.value)
    return ScanResult(findings=findings, counts=count_by_type(findings), errors=errors)
