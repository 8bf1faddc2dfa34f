"""Process-level entry point for running a hook over stdin/stdout.

A hook must never break the agent session: any failure is logged and the
hook emits nothing.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import IO

from aumos_team_governance.hooks.handlers import TeamHooks
from aumos_team_governance.hooks.protocol import read_hook_input, write_hook_output
from aumos_team_governance.hooks.settings import HookSettings

logger = logging.getLogger(__name__)

HOOK_NAMES: tuple[str, ...] = ("permission", "risk")


def run_hook(
    name: str,
    stdin: IO[str],
    stdout: IO[str],
    environ: Mapping[str, str] | None = None,
) -> dict[str, object] | None:
    """Run the hook called *name* and write its payload to *stdout*.

    Parameters
    ----------
    name:
        ``"permission"`` or ``"risk"``.
    stdin:
        Stream holding the JSON job descriptor.
    stdout:
        Stream receiving at most one JSON object.
    environ:
        Environment mapping; ``os.environ`` when omitted.

    Returns
    -------
    dict[str, object] | None
        The payload written, or ``None`` when the hook stayed silent.
    """
    try:
        if name not in HOOK_NAMES:
            raise ValueError(f"Unknown hook {name!r}. Known hooks: {', '.join(HOOK_NAMES)}.")
        settings = HookSettings.from_environ(environ)
        hook_input = read_hook_input(stdin)
        hooks = TeamHooks(settings)
        if name == "permission":
            payload = hooks.permission_check(hook_input)
        else:
            payload = hooks.risk_warning(hook_input)
        if payload is not None:
            write_hook_output(stdout, payload)
        return payload
    except Exception:
        logger.warning("Hook %r failed; emitting no decision.", name, exc_info=True)
        return None
