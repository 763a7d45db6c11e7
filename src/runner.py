""" Execute a shell command line. """
import filesystem
from command import Command, PipeSpec, RedirectionSpec
from constants import PIPE_SOURCES, PIPE_TARGETS, REDIRECT_SOURCES
from exceptions import ShellSyntaxError
from lexer import tokenize
from output_sink import OutputSink
from parser import LineKind, classify_line, parse_command, parse_pipe, parse_redirection
from shell_builtins import BUILTINS
from shell_logging import get_logger
from shell_state import ShellState

log = get_logger("runner")

UNKNOWN_COMMAND = "Error: Unknown command. Type 'help' for a list of commands."


def execute_command(cmd: Command, state: ShellState, sink: OutputSink) -> int:
    """
    Run one builtin and report any failure to the sink.

    Nothing raised by a builtin escapes from here.
    """
    func = BUILTINS.get(cmd.name)
    if func is None:
        sink.print(UNKNOWN_COMMAND)
        return 127

    if len(cmd.args) < func.min_args:
        sink.print(func.missing)
        return 2

    log.debug("dispatch %s %s", cmd.name, cmd.args)
    try:
        failure = func(cmd.args, state, sink)
    except Exception as e:
        log.exception("%s failed", cmd.name)
        sink.print(f"Error executing command: {e}")
        return 1

    if isinstance(failure, filesystem.Failure):
        log.debug("%s: %s", cmd.name, failure.kind.value)
        sink.print(failure.message)
        return 1
    return 0


def execute_redirection(spec: RedirectionSpec, state: ShellState, sink: OutputSink) -> int:
    cmd = parse_command(spec.command)
    # Only a bare pwd or ls may be redirected.
    if cmd is None or cmd.args or cmd.name not in REDIRECT_SOURCES:
        sink.print("Error: Redirection only supports ls and pwd commands.")
        return 1

    path = state.resolve(spec.target)
    try:
        with sink.capture_to_file(path, spec.append):
            status = execute_command(cmd, state, sink)
    except (OSError, ValueError) as e:
        log.debug("cannot redirect to %s: %s", path, e)
        sink.print("Error: Could not redirect output to file.")
        return 1

    sink.print(f"Output redirected to {spec.target}")
    return status


def execute_pipe(spec: PipeSpec, state: ShellState, sink: OutputSink) -> int:
    left = parse_command(spec.left)
    if left is None or left.args or left.name not in PIPE_SOURCES:
        sink.print("Error: Unsupported command for piping.")
        return 1

    with sink.capture_to_buffer() as buf:
        status = execute_command(left, state, sink)

    # Only the leading word of the right side matters; its arguments are ignored.
    right = tokenize(spec.right)
    if right[0].lower() not in PIPE_TARGETS:
        sink.print("Error: Unsupported second command for piping.")
        return 1

    sink.write(buf.getvalue())
    return status


def execute_line(line: str, state: ShellState, sink: OutputSink) -> int:
    """ Classify a raw line and run it. """
    kind = classify_line(line)
    log.debug("%s: %r", kind.value, line)

    try:
        if kind is LineKind.REDIRECTION:
            return execute_redirection(parse_redirection(line), state, sink)
        if kind is LineKind.PIPE:
            return execute_pipe(parse_pipe(line), state, sink)

        cmd = parse_command(line)
        if cmd is None:
            return 0
        return execute_command(cmd, state, sink)
    except ShellSyntaxError as e:
        sink.print(str(e))
        return 2
    except Exception as e:
        # Failures outside a builtin, such as writing the piped text
        log.exception("line failed: %r", line)
        sink.print(f"Error executing command: {e}")
        return 1
