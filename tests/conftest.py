from pathlib import Path

import pytest

from src.rules.loader import reset_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rules_path(project_root: Path) -> Path:
    """Path to the shipped rules file."""
    return project_root / "date-tasks_rules.yaml"


@pytest.fixture(autouse=True)
def cleanup_rules():
    """Reset rules singleton after each test."""
    yield
    reset_rules()
