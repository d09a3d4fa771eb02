"""
Rules loading and validation tests.

Verifies that the rules loader validates date-tasks_rules.yaml and
fails fast on bad files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.adapters.rules_adapter import RulesAdapter
from src.rules.loader import get_rules, init_rules, load_rules, resolve_rules_path
from src.rules.models import Rules


def write_rules(tmp_path: Path, rules: Any) -> Path:
    """Write a rules file for testing."""
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.dump(rules))
    return path


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_actual_rules_file(self, rules_path: Path) -> None:
        """Shipped rules file loads with expected values."""
        rules = load_rules(rules_path)
        assert rules.project.slug == "date-tasks"
        assert rules.timezone.local == "UTC"
        assert rules.parsing.rfc2822.accept_legacy_forms is True
        assert rules.timespan.negative_policy == "error"

    def test_defaults_for_missing_sections(self, tmp_path: Path) -> None:
        """Only project is required."""
        path = write_rules(tmp_path, {"project": {"slug": "x", "rules_version": "1"}})
        rules = load_rules(path)
        assert rules.timezone.local == "UTC"
        assert rules.timespan.min_hour_digits == 2
        assert rules.logging.level == "INFO"

    def test_load_nonexistent_file_raises(self) -> None:
        """Loading nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_rules("/nonexistent/path/rules.yaml")

    def test_load_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Loading invalid YAML raises ValueError."""
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """A YAML list is not a rules file."""
        path = write_rules(tmp_path, ["a", "b"])
        with pytest.raises(ValueError):
            load_rules(path)


class TestRulesValidation:
    """Test schema validation."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"timezone": {"local": "Mars/Olympus"}},
            {"timespan": {"negative_policy": "wrap"}},
            {"timespan": {"min_hour_digits": 0}},
            {"timespan": {"min_hour_digits": 1}},
            {"logging": {"level": "LOUD"}},
            {"unexpected": True},
        ],
    )
    def test_invalid_values(self, tmp_path: Path, overrides: dict[str, Any]) -> None:
        """Invalid values fail validation."""
        data = {"project": {"slug": "x", "rules_version": "1"}, **overrides}
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(tmp_path, data))

    def test_missing_project(self, tmp_path: Path) -> None:
        """project section is required."""
        with pytest.raises(ValueError):
            load_rules(write_rules(tmp_path, {"timezone": {"local": "UTC"}}))


class TestRulesResolution:
    """Test rules path resolution and the singleton."""

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """RULES_PATH is used when no path is given."""
        path = write_rules(tmp_path, {"project": {"slug": "env", "rules_version": "1"}})
        monkeypatch.setenv("RULES_PATH", str(path))
        assert resolve_rules_path() == path
        assert load_rules().project.slug == "env"

    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit path overrides RULES_PATH."""
        monkeypatch.setenv("RULES_PATH", "/elsewhere.yaml")
        assert resolve_rules_path(tmp_path / "a.yaml") == tmp_path / "a.yaml"

    def test_project_root_default(self, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without env var the project root file is used."""
        monkeypatch.delenv("RULES_PATH", raising=False)
        monkeypatch.chdir(project_root)
        assert resolve_rules_path() == project_root / "date-tasks_rules.yaml"

    def test_get_before_init_raises(self) -> None:
        """get_rules requires init_rules."""
        with pytest.raises(RuntimeError):
            get_rules()

    def test_init_then_get(self, rules_path: Path) -> None:
        """init_rules stores the loaded rules."""
        rules = init_rules(rules_path)
        assert get_rules() is rules


class TestRulesAdapter:
    """Test mapping rules onto component ports."""

    def test_getters(self) -> None:
        """Adapter exposes each configured value."""
        rules = Rules.model_validate(
            {
                "project": {"slug": "x", "rules_version": "1"},
                "timezone": {"local": "Asia/Tokyo"},
                "parsing": {
                    "rfc2822": {"accept_legacy_forms": False},
                    "iso8601": {"date_only_as_utc": False},
                },
                "timespan": {"negative_policy": "clamp", "min_hour_digits": 3},
            }
        )
        adapter = RulesAdapter(rules)

        assert adapter.get_local_timezone() == "Asia/Tokyo"
        assert adapter.accept_legacy_rfc2822_forms() is False
        assert adapter.iso8601_date_only_as_utc() is False
        assert adapter.get_negative_policy() == "clamp"
        assert adapter.get_min_hour_digits() == 3
