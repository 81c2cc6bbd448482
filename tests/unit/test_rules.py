"""
Rules loading and validation tests.

Verifies that the rules loader validates rules.yaml structure and feeds the
strutil component through the rules adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.components.strutil import PreviewInput, RulesAdapter, run_preview
from src.rules.loader import RULES_PATH_ENV, load_rules, load_rules_from_env
from src.rules.models import Rules


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


@pytest.fixture
def valid_rules_path(project_root: Path) -> Path:
    """Path to the actual rules.yaml file."""
    return project_root / "rules.yaml"


def write_rules(tmp_path: Path, rules: dict[str, Any]) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.dump(rules))
    return path


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_actual_rules_file(self, valid_rules_path: Path) -> None:
        """Rules file loads successfully."""
        rules = load_rules(valid_rules_path)
        assert isinstance(rules, Rules)
        assert rules.project.slug == "strutil-py"
        assert rules.text.truncation.ellipsis == "..."

    def test_load_nonexistent_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_load_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_markdown_fenced_yaml(self, tmp_path: Path) -> None:
        """A ```yaml block inside markdown is extracted."""
        path = tmp_path / "rules.md"
        path.write_text(
            "# Rules\n\n```yaml\nproject:\n  slug: fenced\n  rules_version: '2'\n```\n\ntrailing"
        )

        rules = load_rules(path)
        assert rules.project.slug == "fenced"

    def test_env_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write_rules(tmp_path, {"project": {"slug": "env", "rules_version": "1"}})
        monkeypatch.setenv(RULES_PATH_ENV, str(path))

        assert load_rules_from_env().project.slug == "env"


class TestRulesSchemaValidation:
    """Test schema validation of rules content."""

    def test_defaults_applied(self, tmp_path: Path) -> None:
        """Omitted text section falls back to defaults."""
        path = write_rules(tmp_path, {"project": {"slug": "p", "rules_version": "1"}})

        rules = load_rules(path)
        assert rules.text.truncation.preview_max_length == 80
        assert rules.text.random.default_length == 16
        assert rules.text.hex.uppercase is True

    def test_missing_project_rejected(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"text": {}})

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_negative_length_rejected(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {
                "project": {"slug": "p", "rules_version": "1"},
                "text": {"random": {"default_length": -1}},
            },
        )

        with pytest.raises(ValueError):
            load_rules(path)

    def test_unknown_text_key_rejected(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {
                "project": {"slug": "p", "rules_version": "1"},
                "text": {"colour": "blue"},
            },
        )

        with pytest.raises(ValueError):
            load_rules(path)

    def test_ellipsis_longer_than_preview_rejected(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path,
            {
                "project": {"slug": "p", "rules_version": "1"},
                "text": {"truncation": {"ellipsis": "[more]", "preview_max_length": 3}},
            },
        )

        with pytest.raises(ValueError):
            load_rules(path)


class TestRulesAdapter:
    """Test the RulesPort adapter over a Rules model."""

    def test_reads_values(self) -> None:
        rules = Rules.model_validate(
            {
                "project": {"slug": "p", "rules_version": "1"},
                "text": {
                    "truncation": {"ellipsis": "~", "preview_max_length": 10},
                    "random": {"default_length": 4},
                    "hex": {"uppercase": False},
                },
            }
        )
        adapter = RulesAdapter(rules)

        assert adapter.get_ellipsis() == "~"
        assert adapter.get_preview_max_length() == 10
        assert adapter.get_random_default_length() == 4
        assert adapter.get_hex_uppercase() is False

    def test_project_rules_drive_component(self, rules_port: RulesAdapter) -> None:
        """The shipped rules.yaml gives the documented defaults."""
        result = run_preview(PreviewInput(text="x" * 100), rules=rules_port)

        assert len(result.text) == 80
        assert result.text.endswith("...")
