"""YAML loader for project risk-area definitions.

Projects can override the built-in risk areas with a ``risk-areas.yaml``
file. The file holds a list of entries, either at the top level or under a
``risk_areas`` key:

::

    - level: CRITICAL
      patterns:
        - "**/payment/**"
      reviewers:
        - qa-manager
      reason: "Financial transaction logic"

    - level: high
      patterns:
        - "**/engine/**"
      reviewers:
        - tech-lead
      reason: "Core engine code"

Levels are case-insensitive. Entries naming an unknown level are dropped.
Glob patterns must be quoted, since an unquoted leading ``*`` is a YAML
alias.

Example
-------
::

    loader = RiskAreaLoader()
    areas = loader.load_or_default(loader.discover(Path.cwd()))
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from aumos_team_governance.risk.areas import DEFAULT_RISK_AREAS, RiskArea, RiskLevel

logger = logging.getLogger(__name__)

CONFIG_CANDIDATES: tuple[str, ...] = (
    ".claude/risk-areas.yaml",
    "risk-areas.yaml",
    ".claude/risk-areas.yml",
)


class RiskConfigError(ValueError):
    """Raised when a risk-area config is malformed or invalid.

    Attributes
    ----------
    config_path:
        The path to the config file that caused the error, if known.
    """

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        prefix = f"[{config_path}] " if config_path else ""
        super().__init__(f"{prefix}{message}")


class RiskAreaEntry(BaseModel):
    """One entry of a risk-area config file."""

    model_config = {"extra": "allow"}

    level: str
    patterns: list[str] = Field(default_factory=list)
    reviewers: list[str] = Field(default_factory=list)
    reason: str = Field(default="")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> str:
        return str(value).strip().upper()

    @field_validator("patterns", "reviewers", mode="before")
    @classmethod
    def coerce_string_list(cls, value: object) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value if item is not None]
        raise ValueError(f"Expected a list of strings, got {type(value).__name__}.")

    @field_validator("reason", mode="before")
    @classmethod
    def coerce_reason(cls, value: object) -> str:
        return "" if value is None else str(value)

    def to_area(self) -> RiskArea | None:
        """Return the RiskArea for this entry, or ``None`` for unknown levels."""
        level = RiskLevel.parse(self.level)
        if level is None:
            return None
        return RiskArea(
            level=level,
            patterns=tuple(self.patterns),
            reviewers=tuple(self.reviewers),
            reason=self.reason,
        )


class RiskAreaLoader:
    """Loads risk-area definitions from YAML files, strings or lists.

    The ``load*`` methods raise on invalid input. :meth:`load_or_default`
    never raises and falls back to the built-in areas instead.
    """

    def load(self, config_path: str | Path) -> tuple[RiskArea, ...]:
        """Load risk areas from a YAML file on disk.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        RiskConfigError
            If the file is not UTF-8, cannot be parsed or holds no valid
            risk areas.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Risk-area config not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except UnicodeDecodeError as exc:
            raise RiskConfigError(f"Config is not valid UTF-8: {exc}", str(config_path)) from exc
        except yaml.YAMLError as exc:
            raise RiskConfigError(f"Failed to parse YAML: {exc}", str(config_path)) from exc

        return self._build_areas(raw, config_path=str(config_path))

    def load_from_yaml_string(
        self,
        yaml_string: str,
        config_path: str | None = None,
    ) -> tuple[RiskArea, ...]:
        """Load risk areas from YAML text."""
        try:
            raw = yaml.safe_load(yaml_string)
        except yaml.YAMLError as exc:
            raise RiskConfigError(f"Failed to parse YAML string: {exc}", config_path) from exc
        return self._build_areas(raw, config_path=config_path)

    def load_from_list(
        self,
        entries: list[dict[str, object]] | dict[str, object],
        config_path: str | None = None,
    ) -> tuple[RiskArea, ...]:
        """Load risk areas from already-parsed data."""
        return self._build_areas(entries, config_path=config_path)

    def load_or_default(self, config_path: str | Path | None) -> tuple[RiskArea, ...]:
        """Load risk areas, falling back to the defaults on any failure.

        Parameters
        ----------
        config_path:
            Path to a risk-area file, or ``None`` to use the defaults.

        Returns
        -------
        tuple[RiskArea, ...]
        """
        if config_path is None:
            return DEFAULT_RISK_AREAS
        try:
            return self.load(config_path)
        except (OSError, RiskConfigError) as exc:
            logger.warning("Using default risk areas: %s", exc)
            return DEFAULT_RISK_AREAS

    def discover(self, project_dir: str | Path) -> Path | None:
        """Return the first existing risk-area file under *project_dir*."""
        root = Path(project_dir)
        for candidate in CONFIG_CANDIDATES:
            path = root / candidate
            if path.is_file():
                return path
        return None

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_areas(
        self,
        raw: object,
        config_path: str | None = None,
    ) -> tuple[RiskArea, ...]:
        entries = self._extract_entries(raw, config_path)

        areas: list[RiskArea] = []
        for index, entry in enumerate(entries):
            try:
                parsed = RiskAreaEntry.model_validate(entry)
            except ValidationError as exc:
                raise RiskConfigError(
                    f"Error in risk area at index {index}: {exc}", config_path
                ) from exc
            area = parsed.to_area()
            if area is None:
                logger.warning(
                    "Skipping risk area at index %d with unknown level %r (%s)",
                    index,
                    parsed.level,
                    config_path or "<data>",
                )
                continue
            areas.append(area)

        if not areas:
            raise RiskConfigError("Config defines no valid risk areas.", config_path)

        logger.info("Loaded %d risk areas from %s", len(areas), config_path or "<data>")
        return tuple(areas)

    def _extract_entries(self, raw: object, config_path: str | None) -> list[object]:
        if isinstance(raw, dict):
            raw = raw.get("risk_areas")
        if raw is None:
            raise RiskConfigError("Config contains no risk areas.", config_path)
        if not isinstance(raw, list):
            raise RiskConfigError(
                "Risk areas must be a list (top level or under 'risk_areas').",
                config_path,
            )
        return raw
