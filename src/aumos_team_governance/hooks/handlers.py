"""PreToolUse hook handlers for team agents.

TeamHooks turns a :class:`~aumos_team_governance.hooks.protocol.HookInput`
into at most one output payload. Handlers return ``None`` when they have
nothing to say (an allowed write, an unclassified file, a path outside the
project), and never decide exit codes.

Example
-------
::

    hooks = TeamHooks(HookSettings.from_environ())
    payload = hooks.permission_check(hook_input)
    if payload is not None:
        write_hook_output(sys.stdout, payload)
"""
from __future__ import annotations

import logging

from aumos_team_governance.hooks.messages import (
    format_boundary_violation_message,
    format_denial_message,
    format_unknown_agent_warning,
)
from aumos_team_governance.hooks.paths import to_relative_path
from aumos_team_governance.hooks.protocol import HookInput, context_output, deny_output
from aumos_team_governance.hooks.settings import HookSettings
from aumos_team_governance.matching.pattern_set import PatternMatcher
from aumos_team_governance.permissions.resolver import (
    DenialKind,
    PermissionResolver,
    PermissionVerdict,
)
from aumos_team_governance.permissions.role_parser import Unresolved
from aumos_team_governance.risk.areas import RiskLevel
from aumos_team_governance.risk.classifier import RiskClassifier
from aumos_team_governance.risk.loader import RiskAreaLoader
from aumos_team_governance.risk.report import format_warning_report

logger = logging.getLogger(__name__)


class TeamHooks:
    """Permission and risk hooks sharing one pattern matcher.

    Parameters
    ----------
    settings:
        Agent role and project root for this invocation.
    loader:
        Risk-area loader; the default searches the project for its config file.
    """

    def __init__(
        self,
        settings: HookSettings,
        loader: RiskAreaLoader | None = None,
    ) -> None:
        self._settings = settings
        self._loader = loader or RiskAreaLoader()
        self._matcher = PatternMatcher()
        self._resolver = PermissionResolver(matcher=self._matcher)

    # ------------------------------------------------------------------
    # Permission check
    # ------------------------------------------------------------------

    def permission_check(self, hook_input: HookInput) -> dict[str, object] | None:
        """Deny writes the acting agent's role does not permit.

        Without a role label the write is not blocked; the agent receives a
        warning that the permission could not be verified instead.

        A label that is set but matches no known role is denied as
        ``unknown-role``. Earlier releases of this hook only warned in that
        case; unrecognised roles now fail closed.
        """
        relative_path = self._relative(hook_input)
        if relative_path is None:
            return None

        label = self._settings.role_label
        if label is None:
            return context_output(format_unknown_agent_warning(relative_path))

        verdict = self._resolver.check_label(label, relative_path)
        if verdict.allowed:
            return None

        role_id = label.raw if isinstance(label, Unresolved) else label.role_id
        return deny_output(self._denial_message(verdict, role_id))

    # ------------------------------------------------------------------
    # Risk warning
    # ------------------------------------------------------------------

    def risk_warning(self, hook_input: HookInput) -> dict[str, object] | None:
        """Attach a risk report to edits of CRITICAL, HIGH or MEDIUM files."""
        relative_path = self._relative(hook_input)
        if relative_path is None:
            return None

        config_path = self._loader.discover(self._settings.project_dir)
        areas = self._loader.load_or_default(config_path)
        analysis = RiskClassifier(areas, matcher=self._matcher).analyze(relative_path)

        if analysis is None or analysis.level is RiskLevel.LOW:
            return None
        return context_output(format_warning_report(analysis), hook_input.hook_event_name)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _relative(self, hook_input: HookInput) -> str | None:
        relative_path = to_relative_path(hook_input.file_path, self._settings.project_dir)
        if relative_path is None:
            logger.debug("Nothing to check for %r", hook_input.file_path)
        return relative_path

    @staticmethod
    def _denial_message(verdict: PermissionVerdict, role_id: str) -> str:
        if verdict.kind is DenialKind.DOMAIN_BOUNDARY and verdict.domain:
            target = (verdict.escalation or "unknown").removesuffix("-part-leader")
            return format_boundary_violation_message(
                role_id=role_id,
                agent_domain=verdict.domain,
                target_domain=target,
                file_path=verdict.path,
            )
        return format_denial_message(
            role_id=role_id,
            domain=verdict.domain,
            file_path=verdict.path,
            reason=verdict.reason or "",
            escalation=verdict.escalation,
        )
