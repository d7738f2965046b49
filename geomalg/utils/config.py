"""
Configuration management for geomalg.

Provides a configuration dataclass holding the tolerances used when
validating decoded records and the logging level, with JSON load/save.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any
from pathlib import Path

from ..core.constants import DEFAULT_TOLERANCE


@dataclass
class Config:
    """
    Configuration for geomalg consumers.

    Attributes:
        tolerance: Length tolerance for unit-norm and orthogonality checks
        log_level: Level passed to ``setup_logging`` by ``configure``
        json_indent: Indentation used by ``codec.to_json`` (None = compact)
        extra: Unknown keys found when loading, kept for round-tripping
    """

    tolerance: float = DEFAULT_TOLERANCE

    log_level: str = "WARNING"

    json_indent: Optional[int] = None

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}
        extra_kwargs.update(config_dict.get('extra') or {})

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)


def configure(config: Config):
    """Apply the logging settings of ``config``; returns the package logger."""
    from .log import setup_logging

    return setup_logging(config.log_level)
