""" Current state of the shell. """
import os

from constants import PROMPT_SUFFIX


class ShellState:
    def __init__(self, directory=None):
        if directory is None:
            directory = os.getcwd()
        self.current_directory = os.path.normpath(os.path.abspath(directory))
        self.running = True

    @property
    def prompt(self) -> str:
        return f"{self.current_directory}{PROMPT_SUFFIX}"

    def resolve(self, path: str) -> str:
        """ Resolve path against the current directory. """
        return os.path.normpath(os.path.join(self.current_directory, path))

    def change_directory(self, directory: str):
        # Callers must have checked that directory exists.
        self.current_directory = os.path.normpath(os.path.abspath(directory))

    def stop(self):
        self.running = False
