"""Project-relative path resolution for hook inputs."""
from __future__ import annotations

import os
from pathlib import Path, PurePath

from aumos_team_governance.matching.glob_compiler import normalize_separators


def to_relative_path(file_path: str, project_dir: str | Path) -> str | None:
    """Convert *file_path* to a ``/``-separated path relative to *project_dir*.

    Relative inputs are taken as already project-relative.

    Returns
    -------
    str | None
        ``None`` when the path is empty or resolves outside the project
        root, meaning there is nothing to check.
    """
    if not file_path:
        return None

    if os.path.isabs(file_path):
        try:
            relative = os.path.relpath(file_path, os.fspath(project_dir))
        except ValueError:
            # Different drive on Windows.
            return None
        relative = PurePath(relative).as_posix()
    else:
        relative = normalize_separators(file_path)

    if relative in (".", "..") or relative.startswith("../"):
        return None
    return relative
