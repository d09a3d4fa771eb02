import logging
from pathlib import Path

from src.adapters.rules_adapter import RulesAdapter
from src.adapters.time_zone import LocalTimeAdapter, create_time_adapter
from src.rules.loader import init_rules
from src.rules.models import Rules

logger = logging.getLogger(__name__)


def configure_logging(rules: Rules) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=rules.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def configure(path: Path | str | None = None) -> tuple[RulesAdapter, LocalTimeAdapter]:
    """
    Load rules, set up logging and build the ports the components take.

    Raises FileNotFoundError / ValueError from the rules loader.
    """
    rules = init_rules(path)
    configure_logging(rules)

    time = create_time_adapter(rules.timezone.local)
    logger.info("Configured local timezone %s", time.timezone_name)
    return RulesAdapter(rules), time
