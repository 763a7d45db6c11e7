"""
Filesystem operations behind the shell verbs.

Every function takes the directory that relative names are resolved
against. Operations return their result, or a Failure describing what went
wrong; they do not raise for ordinary filesystem errors.
"""
import enum
import os

from shell_logging import get_logger

log = get_logger("filesystem")


class FailureKind(enum.Enum):
    NOT_FOUND = "not-found"
    NOT_A_DIRECTORY = "not-a-directory"
    IS_A_DIRECTORY = "is-a-directory"
    SOURCE_MISSING = "source-missing"
    IO_ERROR = "io-error"


class Failure:
    """ A failed filesystem operation. """
    def __init__(self, kind: FailureKind, message: str, cause=None):
        self.kind = kind
        self.message = message
        self.cause = cause      # originating OSError, if any

    def __repr__(self):
        return f"Failure({self.kind.name}, {self.message!r})"


def _resolve(directory, name):
    return os.path.normpath(os.path.join(directory, name))


def _io_failure(message, err):
    log.debug("%s (%s)", message, err)
    return Failure(FailureKind.IO_ERROR, message, err)


def resolve_directory(directory: str, name: str) -> str | Failure:
    """ Return the normalized path of directory/name if it is a directory. """
    target = _resolve(directory, name)
    if not os.path.isdir(target):
        return Failure(FailureKind.NOT_A_DIRECTORY, "Error: Directory not found.")
    return target


def list_entries(directory: str, show_hidden=False, reverse=False) -> list[str] | Failure:
    """
    List entry names in directory iteration order.

    Names starting with '.' are dropped unless show_hidden is set; the
    remaining list is reversed when reverse is set. No sorting is applied.
    """
    try:
        entries = os.listdir(directory)
    except OSError as e:
        return _io_failure("Error: Unable to list directory contents.", e)

    if not show_hidden:
        entries = [e for e in entries if not e.startswith(".")]
    if reverse:
        entries.reverse()
    return entries


def make_directory(directory: str, name: str) -> Failure | None:
    try:
        os.mkdir(_resolve(directory, name))
    except OSError as e:
        return _io_failure("Error: Could not create directory.", e)
    return None


def remove_directory(directory: str, name: str) -> Failure | None:
    target = _resolve(directory, name)
    if not os.path.exists(target):
        return Failure(FailureKind.NOT_FOUND, "Error: Directory not found.")
    if not os.path.isdir(target):
        return Failure(FailureKind.NOT_A_DIRECTORY, f"Error: '{name}' is not a directory.")

    try:
        os.rmdir(target)
    except OSError as e:
        return _io_failure("Error: Could not remove directory.", e)
    return None


def create_file(directory: str, name: str) -> Failure | None:
    # Fails when the entry already exists.
    try:
        with open(_resolve(directory, name), "x", encoding="utf-8"):
            pass
    except OSError as e:
        return _io_failure("Error: Could not create file.", e)
    return None


def remove_file(directory: str, name: str) -> Failure | None:
    target = _resolve(directory, name)
    if not os.path.exists(target):
        return Failure(FailureKind.NOT_FOUND, "Error: File not found.")
    if not os.path.isfile(target):
        return Failure(FailureKind.IS_A_DIRECTORY,
                       f"Error: '{name}' is a directory, not a file.")

    try:
        os.remove(target)
    except OSError as e:
        return _io_failure("Error: Could not remove file.", e)
    return None


def read_lines(directory: str, name: str) -> list[str] | Failure:
    try:
        with open(_resolve(directory, name), "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        return _io_failure("Error: Could not read file.", e)


def move(directory: str, source: str, destination: str) -> Failure | None:
    """ Move or rename source to destination, replacing an existing file. """
    src = _resolve(directory, source)
    if not os.path.exists(src):
        return Failure(FailureKind.SOURCE_MISSING, f"Error: Source '{source}' does not exist.")

    try:
        os.replace(src, _resolve(directory, destination))
    except OSError as e:
        return _io_failure(f"Error: Could not move/rename '{source}'.", e)
    return None
