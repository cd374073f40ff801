from __future__ import annotations

import dataclasses
import os

import pytest

from crosspath_mcp.core.config import PathConfig, create_config_from_env
from crosspath_mcp.core.errors import ConfigError


def test_config_defaults_to_platform_separator(clean_env):
    cfg = create_config_from_env()
    assert cfg.sep == os.sep
    assert cfg.log_level == "WARNING"


@pytest.mark.parametrize("value", ["/", "\\"])
def test_config_sep_from_env(clean_env, value):
    clean_env.setenv("CROSSPATH_SEP", value)
    assert create_config_from_env().sep == value


def test_config_rejects_invalid_sep(clean_env):
    clean_env.setenv("CROSSPATH_SEP", "::")
    with pytest.raises(ConfigError, match="sep must be one of"):
        create_config_from_env()


def test_config_log_level(clean_env):
    clean_env.setenv("CROSSPATH_LOG_LEVEL", "debug")
    assert create_config_from_env().log_level == "debug"

    clean_env.setenv("CROSSPATH_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError, match="Unknown log level"):
        create_config_from_env()


def test_config_is_frozen():
    cfg = PathConfig(sep="/")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.sep = "\\"
