"""
Rules loader for date-tasks.

Loads date-tasks_rules.yaml and validates it against the pydantic models.
Invalid rules fail fast: nothing falls back to defaults once a file is found.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "date-tasks_rules.yaml"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Resolve the rules file location.

    Explicit path wins, then the RULES_PATH environment variable,
    then the project root.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get("RULES_PATH")
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules file must contain a mapping: {rules_path}")

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Loaded rules %s (version %s)", rules_path, rules.project.rules_version)
    return rules


# Singleton for app-wide rules access
_loaded_rules: Rules | None = None


def get_rules() -> Rules:
    """
    Get the loaded rules (must call init_rules first).

    Raises:
        RuntimeError: If rules have not been initialized.
    """
    if _loaded_rules is None:
        raise RuntimeError("Rules not initialized. Call init_rules() at startup.")
    return _loaded_rules


def init_rules(path: Path | str | None = None) -> Rules:
    """Load rules once at startup and keep them for get_rules()."""
    global _loaded_rules
    _loaded_rules = load_rules(path)
    return _loaded_rules


def reset_rules() -> None:
    """Reset loaded rules (for testing only)."""
    global _loaded_rules
    _loaded_rules = None
