"""
Configuration Loader - Load configuration from YAML.

Looks for config.yaml in the working directory and the project root.
Every section is optional; missing values fall back to defaults and
unknown keys are ignored.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict

from ..games.snake.config import BoardConfig

logger = logging.getLogger(__name__)


@dataclass
class DisplayConfig:
    """Window settings."""
    title: str = "Snake game"
    fps: int = 60
    show_grid: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class AppConfig:
    """Complete application configuration."""
    board: BoardConfig = field(default_factory=BoardConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in the usual locations."""
    possible_paths = [
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def config_from_dict(data: Dict[str, Any]) -> AppConfig:
    """
    Build an AppConfig from parsed YAML data.

    Raises:
        ValueError: If a section is not a mapping or the board is invalid
    """
    config = AppConfig()

    for name, cls in (("board", BoardConfig), ("display", DisplayConfig), ("logging", LoggingConfig)):
        section = data.get(name)
        if section is None:
            continue
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
        setattr(config, name, _dict_to_dataclass(section, cls))

    return config


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in cwd or project root)

    Returns:
        AppConfig with all settings

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the file does not hold a mapping or has invalid values
    """
    if config_path is None:
        path = _find_config_file()
        if path is None:
            logger.info("No config file found, using defaults")
            return AppConfig()
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return AppConfig()

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    logger.debug("Loaded config from %s", path)
    return config_from_dict(data)


def save_config(config: AppConfig, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: AppConfig to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
