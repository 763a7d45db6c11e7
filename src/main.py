""" Entry point for the dirsh console script. """
from shell import Shell
from shell_config import load_config
from shell_logging import configure_logging
from shell_state import ShellState


def main():
    config = load_config()
    log = configure_logging(config.log_level, config.log_file)
    for message in config.warnings:
        log.warning(message)

    Shell(ShellState(config.start_dir)).run()
    # Always a successful exit, however the session ended
    raise SystemExit(0)


if __name__ == "__main__":
    main()
