from pathlib import Path

import yaml
from pydantic import ValidationError

from calcverse.site.models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """
    Load and validate the site configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Site config not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in site config: {e}") from e

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Site config validation failed:\n{e}") from e
