"""Report generation - rich terminal tables, JSON and Markdown PR comments."""

import json
from datetime import datetime

from rich.console import Console
from rich.table import Table

from codeaudit.github import COMMENT_MARKER
from codeaudit.models import Finding, FindingType, ScanResult, Severity

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}

CATEGORY_LABELS = {
    FindingType.SECURITY: "Security Issues",
    FindingType.LICENSE: "License Violations",
    FindingType.PII: "PII/Secrets Leaks",
    FindingType.AI_PATTERN: "AI Pattern Issues",
}

CATEGORY_ICONS = {
    FindingType.SECURITY: "\U0001f512",
    FindingType.LICENSE: "\U0001f4dc",
    FindingType.PII: "\U0001f510",
    FindingType.AI_PATTERN: "\U0001f916",
}

_SEVERITY_DESC = sorted(Severity, key=lambda s: s.rank, reverse=True)


def render_table(result: ScanResult, console: Console | None = None) -> None:
    console = console or Console()

    if not result.findings:
        console.print("\n[bold green]No findings above the severity threshold.[/]")
        _print_summary(console, result)
        return

    table = Table(title="CodeAudit Findings", show_lines=True)
    table.add_column("Severity", width=10)
    table.add_column("Category", width=12)
    table.add_column("Rule", width=22)
    table.add_column("Location", width=40)
    table.add_column("Description")

    for f in sorted(result.findings, key=lambda f: f.severity.rank, reverse=True):
        color = SEVERITY_COLORS[f.severity]
        table.add_row(
            f"[{color}]{f.severity.value.upper()}[/]",
            f.type.value,
            f.title,
            f.location,
            f.description,
        )

    console.print()
    console.print(table)
    _print_summary(console, result)


def _print_summary(console: Console, result: ScanResult) -> None:
    parts = [
        f"{CATEGORY_LABELS[t]}: {n}" for t, n in result.counts.items() if n > 0
    ]
    console.print(f"\n[bold]Summary:[/] {result.total} finding(s) | {' | '.join(parts) if parts else 'Clean'}")
    for error in result.errors:
        console.print(f"[yellow]Warning:[/] {error}")
    console.print()


def render_json(result: ScanResult) -> str:
    output = {
        "$schema": "codeaudit-v1",
        "generated_at": datetime.now().isoformat(),
        **result.to_dict(),
    }
    return json.dumps(output, indent=2)


def render_markdown(result: ScanResult) -> str:
    """Render the pull request comment body, findings grouped by severity."""
    lines = [COMMENT_MARKER, "## AI Code Audit Report", ""]

    if result.total == 0:
        lines.append("### No issues found")
        lines.append("")
        lines.append(
            "All checks passed. No security issues, license violations, "
            "PII leaks, or AI-pattern issues detected."
        )
    else:
        lines.extend(["### Summary", "", "| Category | Count |", "|----------|-------|"])
        for category in (FindingType.SECURITY, FindingType.LICENSE, FindingType.PII, FindingType.AI_PATTERN):
            if result.counts[category] > 0:
                lines.append(f"| {CATEGORY_LABELS[category]} | {result.counts[category]} |")
        lines.append(f"| **Total** | **{result.total}** |")
        lines.extend(["", "### Findings", ""])

        for severity in _SEVERITY_DESC:
            group = [f for f in result.findings if f.severity is severity]
            if not group:
                continue
            opened = " open" if severity >= Severity.HIGH else ""
            lines.append(f"<details{opened}>")
            lines.append(f"<summary><strong>{severity.value.capitalize()} ({len(group)})</strong></summary>")
            lines.append("")
            lines.extend(_format_findings(group))
            lines.append("</details>")
            lines.append("")

    lines.extend(["---", "", "*Generated by CodeAudit*"])
    return "\n".join(lines)


def _format_findings(findings: list[Finding]) -> list[str]:
    lines: list[str] = []
    for f in findings:
        lines.append(f"#### {CATEGORY_ICONS[f.type]} {f.title}")
        lines.append("")
        lines.append(f"**Location:** `{f.location}`")
        lines.append("")
        lines.append(f"**Issue:** {f.description}")
        if f.suggestion:
            lines.append("")
            lines.append(f"**Suggestion:** {f.suggestion}")
        lines.extend(["", "---", ""])
    return lines
