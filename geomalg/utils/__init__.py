"""
Utility functions for geomalg.

Includes angle unit helpers, record encoding/decoding, configuration
management and logging setup.
"""

from .angles import (
    radians,
    degrees,
    turns,
    in_degrees,
    in_turns,
    normalize_angle,
)
from .codec import encode, decode, to_json, from_json
from .config import Config, load_config, save_config, configure
from .log import setup_logging

__all__ = [
    # Angles
    "radians",
    "degrees",
    "turns",
    "in_degrees",
    "in_turns",
    "normalize_angle",
    # Codec
    "encode",
    "decode",
    "to_json",
    "from_json",
    # Config
    "Config",
    "load_config",
    "save_config",
    "configure",
    # Logging
    "setup_logging",
]
