"""Tests for RiskAreaLoader."""
from __future__ import annotations

import pathlib

import pytest

from aumos_team_governance.risk.areas import DEFAULT_RISK_AREAS, RiskLevel
from aumos_team_governance.risk.loader import (
    RiskAreaEntry,
    RiskAreaLoader,
    RiskConfigError,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_VALID_YAML = """\
- level: CRITICAL
  patterns:
    - "**/ledger/**"
  reviewers:
    - qa-manager
  reason: "Ledger writes"
- level: high
  patterns:
    - "**/engine/**"
  reviewers: tech-lead
  reason: "Core engine code"
"""


@pytest.fixture()
def loader() -> RiskAreaLoader:
    return RiskAreaLoader()


# ---------------------------------------------------------------------------
# load_from_yaml_string / load_from_list
# ---------------------------------------------------------------------------


class TestLoadFromYamlString:
    def test_areas_loaded_in_order(self, loader: RiskAreaLoader) -> None:
        areas = loader.load_from_yaml_string(_VALID_YAML)
        assert [area.level for area in areas] == [RiskLevel.CRITICAL, RiskLevel.HIGH]

    def test_scalar_reviewers_coerced(self, loader: RiskAreaLoader) -> None:
        areas = loader.load_from_yaml_string(_VALID_YAML)
        assert areas[1].reviewers == ("tech-lead",)

    def test_risk_areas_key(self, loader: RiskAreaLoader) -> None:
        text = 'risk_areas:\n  - level: LOW\n    patterns: ["docs/**"]\n'
        areas = loader.load_from_yaml_string(text)
        assert areas[0].patterns == ("docs/**",)
        assert areas[0].reason == ""

    def test_unknown_level_dropped(self, loader: RiskAreaLoader) -> None:
        text = '- level: SEVERE\n  patterns: ["a/**"]\n- level: LOW\n  patterns: ["b/**"]\n'
        areas = loader.load_from_yaml_string(text)
        assert len(areas) == 1
        assert areas[0].level is RiskLevel.LOW

    def test_only_unknown_levels_raises(self, loader: RiskAreaLoader) -> None:
        with pytest.raises(RiskConfigError, match="no valid risk areas"):
            loader.load_from_yaml_string('- level: SEVERE\n  patterns: ["a/**"]\n')

    def test_unquoted_glob_is_yaml_error(self, loader: RiskAreaLoader) -> None:
        with pytest.raises(RiskConfigError):
            loader.load_from_yaml_string("- level: LOW\n  patterns:\n    - **/tests/**\n")

    def test_empty_document_raises(self, loader: RiskAreaLoader) -> None:
        with pytest.raises(RiskConfigError):
            loader.load_from_yaml_string("")

    def test_non_list_raises(self, loader: RiskAreaLoader) -> None:
        with pytest.raises(RiskConfigError, match="must be a list"):
            loader.load_from_yaml_string("risk_areas: 3\n")

    def test_missing_level_raises(self, loader: RiskAreaLoader) -> None:
        with pytest.raises(RiskConfigError, match="index 0"):
            loader.load_from_yaml_string('- patterns: ["a/**"]\n')

    def test_error_carries_config_path(self, loader: RiskAreaLoader) -> None:
        with pytest.raises(RiskConfigError) as exc_info:
            loader.load_from_yaml_string("", config_path="risk.yaml")
        assert exc_info.value.config_path == "risk.yaml"
        assert str(exc_info.value).startswith("[risk.yaml]")


class TestLoadFromList:
    def test_parsed_data(self, loader: RiskAreaLoader) -> None:
        areas = loader.load_from_list([{"level": "medium", "patterns": ["**/api/**"]}])
        assert areas[0].level is RiskLevel.MEDIUM


class TestRiskAreaEntry:
    def test_to_area_unknown_level(self) -> None:
        entry = RiskAreaEntry.model_validate({"level": "nope", "patterns": ["x"]})
        assert entry.level == "NOPE"
        assert entry.to_area() is None

    def test_null_fields(self) -> None:
        entry = RiskAreaEntry.model_validate({"level": "low", "patterns": None, "reason": None})
        assert entry.patterns == []
        assert entry.reason == ""


# ---------------------------------------------------------------------------
# Files on disk
# ---------------------------------------------------------------------------


class TestLoadFile:
    def test_load(self, loader: RiskAreaLoader, tmp_path: pathlib.Path) -> None:
        config = tmp_path / "risk-areas.yaml"
        config.write_text(_VALID_YAML, encoding="utf-8")
        assert len(loader.load(config)) == 2

    def test_missing_file_raises(self, loader: RiskAreaLoader, tmp_path: pathlib.Path) -> None:
        with pytest.raises(FileNotFoundError):
            loader.load(tmp_path / "absent.yaml")

    def test_non_utf8_file_raises_config_error(
        self, loader: RiskAreaLoader, tmp_path: pathlib.Path
    ) -> None:
        config = tmp_path / "risk-areas.yaml"
        config.write_bytes(b'- level: LOW\n  reason: "caf\xe9"\n')
        with pytest.raises(RiskConfigError, match="not valid UTF-8") as exc_info:
            loader.load(config)
        assert exc_info.value.config_path == str(config)


class TestLoadOrDefault:
    def test_none_returns_defaults(self, loader: RiskAreaLoader) -> None:
        assert loader.load_or_default(None) == DEFAULT_RISK_AREAS

    def test_missing_file_returns_defaults(
        self, loader: RiskAreaLoader, tmp_path: pathlib.Path
    ) -> None:
        assert loader.load_or_default(tmp_path / "absent.yaml") == DEFAULT_RISK_AREAS

    def test_malformed_file_returns_defaults(
        self, loader: RiskAreaLoader, tmp_path: pathlib.Path
    ) -> None:
        config = tmp_path / "risk-areas.yaml"
        config.write_text("- level: LOW\n  patterns:\n    - **/x/**\n", encoding="utf-8")
        assert loader.load_or_default(config) == DEFAULT_RISK_AREAS

    def test_non_utf8_file_returns_defaults(
        self, loader: RiskAreaLoader, tmp_path: pathlib.Path
    ) -> None:
        config = tmp_path / "risk-areas.yaml"
        config.write_bytes(b'- level: CRITICAL\n  reason: "caf\xe9"\n  patterns: ["x/**"]\n')
        assert loader.load_or_default(config) == DEFAULT_RISK_AREAS

    def test_valid_file_used(self, loader: RiskAreaLoader, tmp_path: pathlib.Path) -> None:
        config = tmp_path / "risk-areas.yaml"
        config.write_text(_VALID_YAML, encoding="utf-8")
        assert loader.load_or_default(config)[0].patterns == ("**/ledger/**",)


class TestDiscover:
    def test_nothing_found(self, loader: RiskAreaLoader, tmp_path: pathlib.Path) -> None:
        assert loader.discover(tmp_path) is None

    def test_claude_dir_preferred(self, loader: RiskAreaLoader, tmp_path: pathlib.Path) -> None:
        (tmp_path / ".claude").mkdir()
        (tmp_path / ".claude" / "risk-areas.yaml").write_text(_VALID_YAML, encoding="utf-8")
        (tmp_path / "risk-areas.yaml").write_text(_VALID_YAML, encoding="utf-8")
        assert loader.discover(tmp_path) == tmp_path / ".claude" / "risk-areas.yaml"

    def test_yml_extension(self, loader: RiskAreaLoader, tmp_path: pathlib.Path) -> None:
        (tmp_path / ".claude").mkdir()
        (tmp_path / ".claude" / "risk-areas.yml").write_text(_VALID_YAML, encoding="utf-8")
        assert loader.discover(tmp_path) == tmp_path / ".claude" / "risk-areas.yml"
