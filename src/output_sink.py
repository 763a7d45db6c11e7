""" Destination for user-facing output, with capture to a file or buffer. """
import contextlib
import io
import sys

from exceptions import CaptureError
from shell_logging import get_logger

log = get_logger("sink")


class OutputSink:
    """
    Where command output goes.

    Writes normally reach the console stream. While a capture is active they
    go to the capture destination instead. Only one capture may be active at
    a time, and leaving the capture block always restores the console.
    """
    def __init__(self, console=None):
        # None means sys.stdout, looked up at write time
        self._console = console
        self._capture = None

    @property
    def console(self):
        return self._console if self._console is not None else sys.stdout

    @property
    def stream(self):
        if self._capture is not None:
            return self._capture
        return self.console

    @property
    def capturing(self) -> bool:
        return self._capture is not None

    def write(self, text: str):
        self.stream.write(text)

    def print(self, *values, sep=" ", end="\n"):
        print(*values, sep=sep, end=end, file=self.stream)

    @contextlib.contextmanager
    def capture(self, destination):
        if self._capture is not None:
            raise CaptureError("output is already being captured")

        log.debug("capture started: %r", destination)
        self._capture = destination
        try:
            yield destination
        finally:
            self._capture = None
            log.debug("capture ended: %r", destination)

    @contextlib.contextmanager
    def capture_to_file(self, path, append):
        if self._capture is not None:
            raise CaptureError("output is already being captured")

        mode = "a" if append else "w"
        with open(path, mode, encoding="utf-8") as f:
            with self.capture(f):
                yield f

    @contextlib.contextmanager
    def capture_to_buffer(self):
        buf = io.StringIO()
        with self.capture(buf):
            yield buf
