"""
Tests for configuration, logging setup and angle helpers.
"""

import json
import logging
import math

import pytest

from geomalg.core.constants import DEFAULT_TOLERANCE
from geomalg.utils import (
    Config,
    configure,
    degrees,
    in_degrees,
    in_turns,
    load_config,
    normalize_angle,
    radians,
    save_config,
    setup_logging,
    turns,
)
from geomalg.utils.log import LOGGER_NAME


@pytest.fixture
def restore_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestConfig:

    def test_defaults(self):
        """Default settings."""
        config = Config()
        assert config.tolerance == DEFAULT_TOLERANCE
        assert config.log_level == "WARNING"
        assert config.json_indent is None
        assert config.extra == {}

    def test_negative_tolerance_rejected(self):
        """Tolerance must be non-negative."""
        with pytest.raises(ValueError):
            Config(tolerance=-1.0)

    def test_dict_roundtrip(self):
        """from_dict inverts to_dict."""
        config = Config(tolerance=1e-4, json_indent=2)
        assert Config.from_dict(config.to_dict()) == config

    def test_unknown_keys_go_to_extra(self):
        """Unrecognized keys are kept under extra."""
        config = Config.from_dict({"tolerance": 1e-3, "units": "mm"})
        assert config.tolerance == 1e-3
        assert config.extra == {"units": "mm"}

    def test_update_returns_new_config(self):
        """update leaves the original untouched."""
        config = Config()
        updated = config.update(log_level="DEBUG")
        assert updated.log_level == "DEBUG"
        assert config.log_level == "WARNING"

    def test_save_and_load(self, tmp_path):
        """Configs save as JSON, creating parent directories."""
        path = tmp_path / "nested" / "config.json"
        config = Config(tolerance=1e-8, extra={"units": "m"})
        save_config(config, str(path))
        assert json.loads(path.read_text())["tolerance"] == 1e-8
        assert load_config(str(path)) == config


class TestLogging:

    def test_setup_logging_by_name(self, restore_logger):
        """Levels can be given by name, case-insensitively."""
        logger = setup_logging("debug")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_is_idempotent(self, restore_logger):
        """Repeated setup does not stack handlers."""
        setup_logging(logging.INFO)
        logger = setup_logging(logging.INFO)
        assert len(logger.handlers) == 1

    def test_setup_logging_with_file(self, restore_logger, tmp_path):
        """Child loggers write to the log file."""
        log_file = tmp_path / "geomalg.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        logging.getLogger("geomalg.euclid.frames").debug("hello from frames")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from frames" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()

    def test_setup_logging_closes_previous_file(self, restore_logger, tmp_path):
        """Reconfiguring closes the file handler from the previous call."""
        first = setup_logging(logging.DEBUG, log_file=str(tmp_path / "a.log"))
        old_handlers = [h for h in first.handlers if isinstance(h, logging.FileHandler)]
        assert len(old_handlers) == 1

        logger = setup_logging(logging.DEBUG, log_file=str(tmp_path / "b.log"))
        assert old_handlers[0].stream is None
        assert old_handlers[0] not in logger.handlers
        assert len(logger.handlers) == 2
        for handler in logger.handlers:
            handler.close()

    def test_unknown_level(self, restore_logger):
        """Unknown level names are rejected."""
        with pytest.raises(ValueError, match="LOUD"):
            setup_logging("loud")

    def test_configure_uses_config_level(self, restore_logger):
        """configure applies Config.log_level."""
        logger = configure(Config(log_level="ERROR"))
        assert logger.level == logging.ERROR


class TestAngles:

    def test_units(self):
        """Angle unit conversions."""
        assert radians(1.5) == 1.5
        assert degrees(180) == pytest.approx(math.pi)
        assert turns(0.25) == pytest.approx(math.pi / 2)
        assert in_degrees(math.pi / 2) == pytest.approx(90.0)
        assert in_turns(math.pi) == pytest.approx(0.5)

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (3 * math.pi / 2, -math.pi / 2),
        (-5 * math.pi / 2, -math.pi / 2),
        (7.0, 7.0 - 2 * math.pi),
    ])
    def test_normalize_angle(self, angle, expected):
        """Angles normalize into (-pi, pi]."""
        assert normalize_angle(angle) == pytest.approx(expected)
