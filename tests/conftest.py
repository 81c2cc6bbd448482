from pathlib import Path

import pytest

from src.components.strutil import RulesAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules() -> Rules:
    """
    Rules loaded from the real rules.yaml at the project root.
    """
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")

    return load_rules(rules_path)


@pytest.fixture
def rules_port(project_rules: Rules) -> RulesAdapter:
    return RulesAdapter(project_rules)
