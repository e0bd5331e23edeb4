"""Standard error output stream"""

import sys
from typing import Optional, TextIO

from prettylogger.core.exceptions import LogIOError
from prettylogger.core.log_event import LogEvent
from prettylogger.formatters.base_formatter import BaseFormatter
from prettylogger.streams.base_stream import OutputStream


class StderrStream(OutputStream):
    """Write formatted log lines to standard error."""

    name = "stderr"

    def __init__(self, enabled: bool = True, stream: Optional[TextIO] = None):
        """
        Initialize stderr stream.

        Args:
            enabled: Initial state (default: enabled)
            stream: Output stream (default: sys.stderr, resolved per write)
        """
        super().__init__(enabled)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def out(self, event: LogEvent, formatter: Optional[BaseFormatter] = None) -> None:
        """Format the event and write it followed by a newline."""
        if not self._enabled:
            return
        if formatter is None:
            raise ValueError("StderrStream requires a formatter")

        line = formatter.format(event)
        try:
            self.stream.write(line + "\n")
            self.stream.flush()
        except OSError as e:
            raise LogIOError(f"Failed to write to stderr: {e}") from e

    def flush(self) -> None:
        """Flush stream."""
        try:
            self.stream.flush()
        except OSError as e:
            raise LogIOError(f"Failed to flush stderr: {e}") from e
