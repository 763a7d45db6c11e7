""" Classify and parse shell command lines. """
import enum

from command import Command, PipeSpec, RedirectionSpec
from exceptions import ShellSyntaxError
from lexer import tokenize


class LineKind(enum.Enum):
    COMMAND = "command"
    REDIRECTION = "redirection"
    PIPE = "pipe"


def classify_line(line: str) -> LineKind:
    """
    Decide how a raw line is executed.

    Redirection wins over pipe: a line holding both '>' and '|' is a
    redirection.
    """
    if ">" in line:
        return LineKind.REDIRECTION
    if "|" in line:
        return LineKind.PIPE
    return LineKind.COMMAND


def parse_command(line: str) -> Command | None:
    """ Split a plain command line into a verb and arguments. """
    tokens = tokenize(line)
    if not tokens:
        return None
    return Command(tokens[0].lower(), tokens[1:])


def parse_redirection(line: str) -> RedirectionSpec:
    append = ">>" in line
    op = ">>" if append else ">"

    command, _, target = line.partition(op)
    command = command.strip()
    target = target.strip()

    # Only one redirection operator per line.
    if not command or not target or ">" in command or ">" in target:
        raise ShellSyntaxError("Error: Invalid syntax for redirection.")

    return RedirectionSpec(command, target, append)


def parse_pipe(line: str) -> PipeSpec:
    # Only the first '|' splits; any later ones stay in the right side.
    left, _, right = line.partition("|")
    left = left.strip()
    right = right.strip()

    if not left or not right:
        raise ShellSyntaxError("Error: Invalid syntax for piping.")

    return PipeSpec(left, right)
