"""Click-based CLI interface for CodeAudit."""

import logging
import sys
from pathlib import Path

import click

from codeaudit.aggregate import aggregate
from codeaudit.config import load_config
from codeaudit.github import (
    DEFAULT_API_URL,
    GitHubClient,
    GitHubError,
    scannable_pull_files,
    write_action_outputs,
)
from codeaudit.models import ChangedFile, Severity
from codeaudit.report import render_json, render_markdown, render_table
from codeaudit.sources import SourceError, load_git_diff, load_paths

SEVERITY_CHOICES = [s.value for s in Severity]


def report_options(func):
    options = [
        click.option("--format", "fmt", type=click.Choice(["table", "json", "markdown"]), default="table"),
        click.option("--severity", "min_severity", type=click.Choice(SEVERITY_CHOICES, case_sensitive=False),
                     default=None, help="Minimum severity to report."),
        click.option("--output", "-o", type=str, default=None, help="Write the report to a file."),
        click.option("--fail-on-findings", is_flag=True, help="Exit with code 1 if any finding is reported."),
        click.option("--no-security", is_flag=True, help="Skip the security scanner."),
        click.option("--no-licenses", is_flag=True, help="Skip the license scanner."),
        click.option("--no-pii", is_flag=True, help="Skip the PII/secrets scanner."),
        click.option("--no-ai-patterns", is_flag=True, help="Skip the AI pattern scanner."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _effective_config(ctx, opts: dict):
    return ctx.obj["config"].with_overrides(
        severity_threshold=opts["min_severity"],
        fail_on_findings=True if opts["fail_on_findings"] else None,
        scan_security=False if opts["no_security"] else None,
        scan_licenses=False if opts["no_licenses"] else None,
        scan_pii=False if opts["no_pii"] else None,
        scan_ai_patterns=False if opts["no_ai_patterns"] else None,
    )


def _run_audit(config, files: list[ChangedFile], opts: dict, github: tuple | None = None) -> None:
    result = aggregate(files, config)
    fmt, output = opts["fmt"], opts["output"]

    if fmt == "table":
        render_table(result)
        if output:
            Path(output).write_text(render_json(result))
            click.echo(f"JSON report also written to {output}")
    else:
        text_out = render_json(result) if fmt == "json" else render_markdown(result)
        if output:
            Path(output).write_text(text_out)
            click.echo(f"Report written to {output}")
        else:
            click.echo(text_out)

    if github:
        client, repo, number = github
        try:
            client.upsert_comment(repo, number, render_markdown(result))
        except GitHubError as exc:
            raise click.ClickException(str(exc)) from exc

    write_action_outputs(result)

    if config.fail_on_findings and result.total > 0:
        click.echo(f"Found {result.total} issue(s)", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="codeaudit")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Path to .codeaudit.yml config file.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, config_path, verbose):
    """CodeAudit - audit changed code for security, license, PII and AI-pattern issues."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path, project_root=".")
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@report_options
@click.pass_context
def scan(ctx, paths, **opts):
    """Scan local files or directories as if every file were newly added."""
    config = _effective_config(ctx, opts)
    _run_audit(config, load_paths(list(paths), config), opts)


@cli.command("scan-diff")
@click.argument("repo", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--base", default="HEAD", show_default=True, help="Git revision to diff against.")
@report_options
@click.pass_context
def scan_diff(ctx, repo, base, **opts):
    """Scan files changed in a git working tree relative to BASE."""
    config = _effective_config(ctx, opts)
    try:
        files = load_git_diff(repo, base, config)
    except SourceError as exc:
        raise click.ClickException(str(exc)) from exc
    _run_audit(config, files, opts)


@cli.command("scan-pr")
@click.option("--repo", envvar="GITHUB_REPOSITORY", required=True, help="owner/name of the repository.")
@click.option("--pr", "number", type=int, required=True, help="Pull request number.")
@click.option("--token", envvar="GITHUB_TOKEN", required=True, help="GitHub token (or $GITHUB_TOKEN).")
@click.option("--api-url", default=DEFAULT_API_URL, show_default=True)
@click.option("--comment", is_flag=True, help="Post or update the report as a PR comment.")
@report_options
@click.pass_context
def scan_pr(ctx, repo, number, token, api_url, comment, **opts):
    """Scan the files changed in a GitHub pull request."""
    config = _effective_config(ctx, opts)
    client = GitHubClient(token, api_url=api_url)
    try:
        files = scannable_pull_files(client.list_pull_files(repo, number), config)
    except GitHubError as exc:
        raise click.ClickException(str(exc)) from exc
    _run_audit(config, files, opts, github=(client, repo, number) if comment else None)
