""" Implement the core of the shell. """
from constants import WELCOME
from output_sink import OutputSink
from runner import execute_line
from shell_logging import get_logger
from shell_state import ShellState

log = get_logger("shell")


def read_command(prompt="$ "):
    """ Read one command line. """
    return input(prompt).strip()


class Shell:
    def __init__(self, state=None, sink=None):
        self.state = state if state is not None else ShellState()
        self.sink = sink if sink is not None else OutputSink()

    def run(self) -> int:
        self.sink.print(WELCOME)
        log.info("session started in %s", self.state.current_directory)

        while self.state.running:
            try:
                line = read_command(self.state.prompt)
                execute_line(line, self.state, self.sink)

            except EOFError:
                self.sink.print()
                break

            except KeyboardInterrupt:
                self.sink.print()

        log.info("session ended")
        return 0
