from pathlib import Path

import pytest

from src.components.fluid_scale import BuildSystemInput, Viewport
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    """
    Load the REAL rules file from the project root.
    """
    return load_rules(rules_path)


@pytest.fixture
def reference_input() -> BuildSystemInput:
    """320px/16px major third -> 1240px/32px minor second."""
    return BuildSystemInput(
        min_viewport=Viewport(width=320, font_size=16, type_scale="major-third"),
        max_viewport=Viewport(width=1240, font_size=32, type_scale="minor-second"),
    )
