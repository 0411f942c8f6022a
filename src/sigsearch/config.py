"""Configuration management for sigsearch."""

from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILE_NAME = ".sigsearch"


@dataclass
class SearchConfig:
    """Configuration for signature search.

    Attributes:
        max_results: Maximum number of ranked declarations to return.
    """
    max_results: int = 10

    @property
    def k(self) -> int:
        """Number of results to return."""
        return self.max_results


def load_search_config(config_dir: Path | None = None) -> SearchConfig:
    """Load search configuration from a .sigsearch file.

    Args:
        config_dir: Directory containing the .sigsearch file. If None, uses
            the current directory.

    Returns:
        SearchConfig object with loaded or default values.

    Notes:
        If the file doesn't exist, can't be parsed or holds invalid values,
        returns default config. Expected YAML structure:

        ```yaml
        search:
          max_results: 10
        ```
    """
    if config_dir is None:
        config_dir = Path.cwd()

    config_path = config_dir / CONFIG_FILE_NAME

    if not config_path.exists():
        return SearchConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return SearchConfig()

        search_config = data.get("search", {})
        if not isinstance(search_config, dict):
            return SearchConfig()

        max_results = search_config.get("max_results", SearchConfig.max_results)
        # bool is an int subclass
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results <= 0:
            return SearchConfig()

        return SearchConfig(max_results=max_results)
    except (yaml.YAMLError, OSError):
        # Return default config on any parsing errors
        return SearchConfig()
