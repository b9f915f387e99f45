"""
Tests for loading and validating rules.yaml.

Fail-fast behavior for missing files, bad YAML and bad schema.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.components.fluid_scale import (
    DEFAULT_CUSTOM_PAIRS,
    DEFAULT_SPACE_PAIRS,
    DEFAULT_SPACE_STEPS,
    DEFAULT_TYPE_SCALE_STEPS,
)
from src.rules.loader import load_rules
from src.rules.models import Rules

MINIMAL_RULES = """\
fluid:
  pixels_per_rem: 16
  type_scale_steps: [0, 2]
  space_steps: {"-S": 1}
  space_pairs: {}
  custom_pairs: {}
"""


class TestLoadRules:
    """Tests for load_rules."""

    def test_load_actual_rules_file(self, rules: Rules) -> None:
        """The shipped rules.yaml matches the built-in defaults."""
        assert rules.fluid.pixels_per_rem == 16
        assert rules.fluid.get_type_scale_steps() == DEFAULT_TYPE_SCALE_STEPS
        assert rules.fluid.space_steps == dict(DEFAULT_SPACE_STEPS)
        assert rules.fluid.space_pairs == dict(DEFAULT_SPACE_PAIRS)
        assert rules.fluid.custom_pairs == dict(DEFAULT_CUSTOM_PAIRS)
        assert rules.css.selector == ":where(html)"
        assert rules.css.media_type == "text/css"

    def test_key_order_preserved(self, rules: Rules) -> None:
        assert list(rules.fluid.space_steps) == list(DEFAULT_SPACE_STEPS)

    def test_plain_yaml_without_fence(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(MINIMAL_RULES)

        rules = load_rules(path)
        assert rules.fluid.get_type_scale_steps() == (0, 2)
        assert rules.css.selector == ":where(html)"

    def test_markdown_fenced_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(f"# Rules\n\nSome prose.\n\n```yaml\n{MINIMAL_RULES}```\n\nMore prose.\n")

        rules = load_rules(path)
        assert rules.fluid.space_steps == {"-S": 1}

    def test_type_scale_steps_uses_first_and_last(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(MINIMAL_RULES.replace("[0, 2]", "[-3, 0, 1, 4]"))

        assert load_rules(path).fluid.get_type_scale_steps() == (-3, 4)

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/rules.yaml"))

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_missing_section_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("css:\n  selector: ':root'\n")

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_non_positive_pixels_per_rem_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(MINIMAL_RULES.replace("pixels_per_rem: 16", "pixels_per_rem: 0"))

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_empty_step_range_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(MINIMAL_RULES.replace("[0, 2]", "[]"))

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)
