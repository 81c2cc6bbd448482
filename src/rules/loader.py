import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path("rules.yaml")
RULES_PATH_ENV = "STRUTIL_RULES_PATH"


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block if present, else the whole content."""
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Rules loaded from %s (version %s)", path, rules.project.rules_version)
    return rules


def load_rules_from_env(default: Path = DEFAULT_RULES_PATH) -> Rules:
    """Load rules from $STRUTIL_RULES_PATH, falling back to default."""
    env_path = os.environ.get(RULES_PATH_ENV)
    path = Path(env_path) if env_path else default
    return load_rules(path)
