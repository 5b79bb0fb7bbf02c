"""
Rules loader - read and validate the helper configuration file.

The file is YAML (optionally wrapped in a markdown ```yaml fence) validated
against the pydantic models in ``oneliners.rules.models``. Every section is
defaulted, so an empty file yields ``Rules()``.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from oneliners.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_ENV_VAR = "ONELINERS_RULES"


class RulesValidationError(ValueError):
    """Raised when a rules file does not match the schema."""


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML cannot be parsed.
        RulesValidationError: If the content fails schema validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    content = _strip_markdown_fences(path.read_text())

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        data = {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise RulesValidationError(f"Rules validation failed:\n{e}") from e

    logger.info("Loaded rules from %s", path)
    return rules


@lru_cache(maxsize=1)
def default_rules() -> Rules:
    """Rules from the file named by $ONELINERS_RULES, or the built-in defaults."""
    env_path = os.environ.get(RULES_ENV_VAR)
    if env_path:
        return load_rules(Path(env_path))
    return Rules()


def _strip_markdown_fences(content: str) -> str:
    lines = content.splitlines()
    yaml_lines: list[str] = []
    in_block = False
    found_block = False

    for line in lines:
        stripped = line.strip()
        if stripped.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and stripped.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    # No fence: treat the whole file as YAML
    if found_block:
        return "\n".join(yaml_lines)
    return content
