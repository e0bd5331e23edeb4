"""In-memory buffer output stream"""

from typing import List, Optional, Tuple

from prettylogger.core.log_event import LogEvent
from prettylogger.formatters.base_formatter import BaseFormatter
from prettylogger.streams.base_stream import OutputStream


class BufferStream(OutputStream):
    """
    Store raw log events in memory.

    Events are kept unformatted and in call order until ``clear()``.

    Example:
        logger.output.buffer_output.enable()
        logger.info("started")
        events = logger.output.buffer_output.get_log_buffer()
    """

    name = "buffer"

    def __init__(self, enabled: bool = False):
        super().__init__(enabled)
        self._buffer: List[LogEvent] = []

    def out(self, event: LogEvent, formatter: Optional[BaseFormatter] = None) -> None:
        """Append the event to the buffer. The formatter is not used."""
        if self._enabled:
            self._buffer.append(event)

    def get_log_buffer(self) -> Tuple[LogEvent, ...]:
        """
        Get stored events.

        Returns:
            Read-only snapshot of the buffer
        """
        return tuple(self._buffer)

    def clear(self) -> None:
        """Remove all stored events."""
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"BufferStream(enabled={self._enabled}, size={len(self._buffer)})"
