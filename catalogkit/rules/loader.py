import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from catalogkit.rules.models import CatalogRules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "catalogkit_rules.yaml"
RULES_PATH_ENV = "CATALOGKIT_RULES_PATH"


class RulesError(ValueError):
    """Raised when the rules file cannot be parsed or fails validation."""


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """Explicit path, then $CATALOGKIT_RULES_PATH, then ./catalogkit_rules.yaml."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_RULES_PATH)


def parse_rules(content: str) -> CatalogRules:
    """
    Parse and validate rules YAML text.
    An empty document yields the defaults.
    Raises RulesError on bad YAML or schema.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RulesError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RulesError("Rules file must contain a mapping at the top level")

    try:
        return CatalogRules.model_validate(data)
    except ValidationError as e:
        raise RulesError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path | str | None = None, *, required: bool = False) -> CatalogRules:
    """
    Load and validate the rules file.

    A missing file falls back to built-in defaults unless required is set,
    in which case FileNotFoundError is raised. A path taken from
    $CATALOGKIT_RULES_PATH is always required.
    """
    rules_path = resolve_rules_path(path)
    if path is None and os.environ.get(RULES_PATH_ENV):
        required = True

    if not rules_path.exists():
        if required:
            raise FileNotFoundError(f"Rules file not found at: {rules_path}")
        logger.debug("No rules file at %s, using defaults", rules_path)
        return CatalogRules()

    with open(rules_path, encoding="utf-8") as f:
        content = f.read()

    rules = parse_rules(content)
    logger.debug("Loaded rules from %s", rules_path)
    return rules
