"""
Configuration Settings
======================

Configuration dataclasses for the node and path helpers.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Union
import json
import logging

import yaml

from tritium_core.text.utils import DEFAULT_BODY_PREFIX, DEFAULT_IMAGE_DIR

logger = logging.getLogger(__name__)

_FORMATS = {
    '.json': 'json',
    '.yaml': 'yaml',
    '.yml': 'yaml',
}


@dataclass
class PathConfig:
    """Prefixes used by the path builders."""

    body_prefix: str = DEFAULT_BODY_PREFIX
    image_dir: str = DEFAULT_IMAGE_DIR


@dataclass
class ClassConfig:
    """Class attribute editing options."""

    # Write an empty class attribute when removing from a node that has none
    create_missing: bool = False


@dataclass
class TritiumConfig:
    """
    Helper configuration, one section per helper family.

    Example:
        config = TritiumConfig()
        config.paths.image_dir = "static/img/"
        save_config(config, Path("tritium.yaml"))
    """

    paths: PathConfig = field(default_factory=PathConfig)
    classes: ClassConfig = field(default_factory=ClassConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'paths': asdict(self.paths),
            'classes': asdict(self.classes),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TritiumConfig':
        """Create from dictionary. Unknown sections are logged and skipped."""
        unknown = set(data) - {'paths', 'classes'}
        if unknown:
            logger.warning(f"Ignoring unknown config sections: {sorted(unknown)}")

        return cls(
            paths=PathConfig(**data.get('paths', {})),
            classes=ClassConfig(**data.get('classes', {})),
        )


def _config_format(config_path: Path) -> str:
    suffix = config_path.suffix.lower()
    if suffix not in _FORMATS:
        raise ValueError(f"Unsupported config format: {suffix}")
    return _FORMATS[suffix]


def load_config(config_path: Union[str, Path]) -> TritiumConfig:
    """
    Load configuration from a JSON or YAML file.

    Args:
        config_path: Path to config file

    Returns:
        TritiumConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    text = config_path.read_text(encoding='utf-8')
    if _config_format(config_path) == 'yaml':
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    logger.info(f"Loaded configuration from {config_path}")
    return TritiumConfig.from_dict(data)


def save_config(config: TritiumConfig, config_path: Union[str, Path]) -> None:
    """
    Save configuration as JSON or YAML, chosen by file extension.

    Raises:
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    fmt = _config_format(config_path)
    data = config.to_dict()

    if fmt == 'yaml':
        text = yaml.dump(data, default_flow_style=False, sort_keys=False)
    else:
        text = json.dumps(data, indent=2)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(text, encoding='utf-8')
    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> TritiumConfig:
    """Get default configuration."""
    return TritiumConfig()
