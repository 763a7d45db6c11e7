""" Runtime settings for the shell, read from the environment. """
import logging
import os
from dataclasses import dataclass

from shell_logging import DEFAULT_LEVEL

ENV_LOG_LEVEL = "DIRSH_LOG_LEVEL"
ENV_LOG_FILE = "DIRSH_LOG_FILE"
ENV_START_DIR = "DIRSH_START_DIR"


@dataclass
class ShellConfig:
    log_level: int = DEFAULT_LEVEL
    log_file: str | None = None
    start_dir: str | None = None
    # Settings that could not be applied, reported once logging is up
    warnings: tuple = ()


def parse_level(name: str) -> int | None:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def load_config(environ=None) -> ShellConfig:
    """
    Build a ShellConfig from environment variables.

    Bad values fall back to the defaults and are listed in config.warnings.
    """
    if environ is None:
        environ = os.environ

    config = ShellConfig()
    warnings = []

    level_name = environ.get(ENV_LOG_LEVEL)
    if level_name:
        level = parse_level(level_name)
        if level is None:
            warnings.append(f"unknown log level {level_name!r}, using WARNING")
        else:
            config.log_level = level

    config.log_file = environ.get(ENV_LOG_FILE) or None

    start_dir = environ.get(ENV_START_DIR)
    if start_dir:
        if os.path.isdir(start_dir):
            config.start_dir = start_dir
        else:
            warnings.append(f"start directory {start_dir!r} is not a directory, ignoring")

    config.warnings = tuple(warnings)
    return config
