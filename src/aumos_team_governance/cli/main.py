"""CLI entry point for aumos-team-governance.

Invoked as::

    team-gov [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m aumos_team_governance.cli.main

Commands
--------
- hook permission  PreToolUse hook: deny writes outside the agent's role
- hook risk        PreToolUse hook: attach a risk report to sensitive edits
- check            Check whether a role may write a path
- classify         Show the risk classification of a path
- roles            List the built-in roles and their write patterns
- version          Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="aumos-team-governance")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (logs go to stderr).",
)
def cli(log_level: str) -> None:
    """Team Governance CLI — role write permissions and risk areas for agent teams."""
    # stdout carries hook JSON, so logs must stay on stderr.
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from aumos_team_governance import __version__

    console.print(
        Panel(
            f"[bold]aumos-team-governance[/bold]  v[cyan]{__version__}[/cyan]\n"
            "Path permissions and risk areas for multi-agent project teams.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# hook group
# ---------------------------------------------------------------------------


@cli.group(name="hook")
def hook_group() -> None:
    """PreToolUse hooks reading a JSON job descriptor from stdin."""


@hook_group.command(name="permission")
def hook_permission_command() -> None:
    """Deny the write when the agent's role does not permit it."""
    from aumos_team_governance.hooks.runner import run_hook

    run_hook("permission", sys.stdin, sys.stdout)
    sys.exit(0)


@hook_group.command(name="risk")
def hook_risk_command() -> None:
    """Attach a risk report when the file lies in a sensitive area."""
    from aumos_team_governance.hooks.runner import run_hook

    run_hook("risk", sys.stdin, sys.stdout)
    sys.exit(0)


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.option(
    "--role",
    "-r",
    "role_label",
    required=True,
    help='Agent role label, e.g. "dba", "auth-developer" or "domain-developer" with --domain.',
)
@click.option("--path", "-p", "file_path", required=True, help="Project-relative path to write.")
@click.option(
    "--domain",
    "-d",
    default=None,
    help="Agent domain; when given, --role is taken as a role identifier.",
)
def check_command(role_label: str, file_path: str, domain: str | None) -> None:
    """Check whether an agent role may write a path."""
    from aumos_team_governance.permissions.resolver import PermissionResolver
    from aumos_team_governance.permissions.role_parser import parse_role_label

    resolver = PermissionResolver()
    path = file_path.replace("\\", "/")
    if domain:
        verdict = resolver.check(role_label, domain, path)
    else:
        verdict = resolver.check_label(parse_role_label(role_label), path)

    status_str = "[green]ALLOWED[/green]" if verdict.allowed else "[red]DENIED[/red]"
    console.print(Panel(status_str, title="Permission Check Result", border_style="blue"))

    console.print(f"  Role: [cyan]{verdict.role_id or role_label}[/cyan]")
    if verdict.domain:
        console.print(f"  Domain: [cyan]{verdict.domain}[/cyan]")
    console.print(f"  Path: {verdict.path}")
    if verdict.reason:
        console.print(f"  Reason: {verdict.reason}")
    if verdict.escalation:
        console.print(f"  Escalate to: [bold magenta]{verdict.escalation}[/bold magenta]")

    sys.exit(0 if verdict.allowed else 1)


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


@cli.command(name="classify")
@click.argument("file_path")
@click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    type=click.Path(),
    help="Risk-area YAML file. Discovered from the working directory when omitted.",
)
def classify_command(file_path: str, config_path: str | None) -> None:
    """Show the risk classification of a project-relative path."""
    from aumos_team_governance.risk.classifier import RiskClassifier
    from aumos_team_governance.risk.loader import RiskAreaLoader

    loader = RiskAreaLoader()
    source = Path(config_path) if config_path else loader.discover(Path.cwd())
    areas = loader.load_or_default(source)
    analysis = RiskClassifier(areas).analyze(file_path.replace("\\", "/"))

    if analysis is None:
        console.print(f"[dim]{file_path}[/dim]: unclassified")
        return

    colour = {
        "CRITICAL": "red",
        "HIGH": "yellow",
        "MEDIUM": "cyan",
        "LOW": "green",
    }[analysis.level.value]

    table = Table(title=f"Risk Classification: {analysis.path}", box=box.SIMPLE)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Level", f"[{colour}]{analysis.level.value}[/{colour}]")
    table.add_row("Reason", analysis.reason)
    table.add_row("Matched Patterns", ", ".join(analysis.matched_patterns))
    table.add_row("Reviewers", ", ".join(analysis.reviewers) or "-")
    console.print(table)

    for item in analysis.checklist:
        console.print(f"  [ ] {item}", markup=False)


# ---------------------------------------------------------------------------
# roles
# ---------------------------------------------------------------------------


@cli.command(name="roles")
def roles_command() -> None:
    """List the built-in roles with their write and restricted patterns."""
    from aumos_team_governance.permissions.roles import list_roles, resolve_role

    table = Table(title="Team Roles", box=box.SIMPLE)
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Write", style="green")
    table.add_column("Cannot", style="red")

    for role_id in list_roles():
        role = resolve_role(role_id, "{domain}")
        if role is None:
            continue
        table.add_row(role.label, "\n".join(role.write), "\n".join(role.cannot) or "-")

    console.print(table)


if __name__ == "__main__":
    cli()
