""" Diagnostic logging for the shell. """
import logging
import sys

ROOT_LOGGER = "dirsh"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s"

DEFAULT_LEVEL = logging.WARNING


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level=DEFAULT_LEVEL, log_file=None) -> logging.Logger:
    """
    Install a single handler on the root shell logger.

    Diagnostics go to log_file when given, otherwise to stderr. They never
    go through the output sink, so redirected and piped output stays clean.
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handler = None
    file_error = None
    if log_file:
        try:
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            file_error = e
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False

    if file_error is not None:
        root.warning("cannot open log file %s (%s), logging to stderr", log_file, file_error)
    return root
