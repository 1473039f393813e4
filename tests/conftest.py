from pathlib import Path

import pytest

from src.app_shell.context import ServiceContext
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent

RULES_YAML = """\
project:
  slug: user-registry-test
  rules_version: "1"
users:
  seed_enabled: true
processing:
  default_strategy: lower
"""


@pytest.fixture
def rules_path(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(RULES_YAML)
    return path


@pytest.fixture
def rules(rules_path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def test_ctx(rules) -> ServiceContext:
    """
    Creates a ServiceContext backed by a fresh in-memory repository.
    """
    return ServiceContext.create(rules)
