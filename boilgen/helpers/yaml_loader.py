"""
Type-safe YAML loader for boilgen settings files.
Provides a validated ruamel.yaml instance with proper type hints.
"""

from pathlib import Path
from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


class YAMLLoader(Protocol):
    """Protocol for YAML loader with comment preservation."""
    preserve_quotes: bool
    default_flow_style: bool

    def load(self, stream: TextIO) -> ConfigValue:
        """Load YAML from stream."""
        ...


def _create_yaml_loader() -> YAMLLoader:
    """Create the shared YAML loader instance.

    Returns:
        YAML loader with comment preservation
    """
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    return cast(YAMLLoader, yaml_obj)


# Singleton loader instance
yaml: YAMLLoader = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML file.

    ruamel.yaml's load() is safe by default (unlike PyYAML's load()).
    It does not execute arbitrary Python code from YAML content.

    Args:
        file_path: Path to YAML file to load

    Returns:
        Whatever the document contains; callers check the shape

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding="utf-8") as f:
        return yaml.load(f)

