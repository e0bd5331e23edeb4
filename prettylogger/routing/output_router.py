"""
Output router for fanning log events out to streams
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from prettylogger.core.exceptions import DispatchError
from prettylogger.core.log_event import LogEvent
from prettylogger.formatters.base_formatter import BaseFormatter
from prettylogger.streams.base_stream import OutputStream
from prettylogger.streams.buffer_stream import BufferStream
from prettylogger.streams.file_stream import FileStream
from prettylogger.streams.stderr_stream import StderrStream


class OutputRouter:
    """
    Routes log events to every enabled output stream.

    The router owns the three standard streams, registered as "stderr",
    "buffer" and "file", and any custom streams registered by name.
    Dispatch is best effort: a failing stream does not stop delivery to
    the others, and all failures are reported together afterwards.

    Example:
        router = OutputRouter()
        router.buffer_output.enable()
        router.register_stream("audit", audit_stream)
        router.dispatch(LogEvent.info("ready"), formatter)
    """

    def __init__(
        self,
        stderr_output: Optional[StderrStream] = None,
        buffer_output: Optional[BufferStream] = None,
        file_output: Optional[FileStream] = None,
        enabled: bool = True,
    ):
        """
        Initialize output router.

        Args:
            stderr_output: Stderr stream (default: enabled StderrStream)
            buffer_output: Buffer stream (default: disabled BufferStream)
            file_output: File stream (default: disabled FileStream)
            enabled: Master gate for all dispatches
        """
        self.stderr_output = stderr_output if stderr_output is not None else StderrStream()
        self.buffer_output = buffer_output if buffer_output is not None else BufferStream()
        self.file_output = file_output if file_output is not None else FileStream()
        self._enabled = enabled
        self._streams: Dict[str, OutputStream] = {
            StderrStream.name: self.stderr_output,
            BufferStream.name: self.buffer_output,
            FileStream.name: self.file_output,
        }

    # Master gate

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def is_enabled(self) -> bool:
        return self._enabled

    # Stream registry

    def register_stream(self, name: str, stream: OutputStream) -> None:
        """
        Register a stream with a name.

        Args:
            name: Unique name for the stream
            stream: OutputStream instance

        Raises:
            ValueError: If name is already registered
        """
        if name in self._streams:
            raise ValueError(f"Stream '{name}' is already registered")
        self._streams[name] = stream

    def unregister_stream(self, name: str) -> None:
        """
        Unregister a custom stream by name.

        Raises:
            ValueError: If name refers to one of the standard streams

        Note:
            Does nothing if the stream is not registered.
        """
        if name in (StderrStream.name, BufferStream.name, FileStream.name):
            raise ValueError(f"Cannot unregister standard stream '{name}'")
        self._streams.pop(name, None)

    def get_stream(self, name: str) -> Optional[OutputStream]:
        return self._streams.get(name)

    def get_stream_names(self) -> List[str]:
        return list(self._streams.keys())

    # Dispatch

    def dispatch(self, event: LogEvent, formatter: BaseFormatter) -> int:
        """
        Send a log event to every enabled stream, in registration order.

        Args:
            event: Log event to dispatch
            formatter: Formatter passed to each stream

        Returns:
            Number of streams that accepted the event

        Raises:
            DispatchError: After all streams were attempted, if any failed
        """
        if not self._enabled:
            return 0

        count = 0
        errors: List[Tuple[str, Exception]] = []
        for name, stream in list(self._streams.items()):
            if not stream.is_enabled():
                continue
            try:
                stream.out(event, formatter)
                count += 1
            except Exception as e:
                errors.append((name, e))

        if errors:
            raise DispatchError(errors)
        return count

    def out(self, event: LogEvent, formatter: BaseFormatter) -> int:
        """Alias of dispatch()."""
        return self.dispatch(event, formatter)

    def flush(self) -> None:
        """
        Flush every stream.

        Raises:
            DispatchError: After all streams were attempted, if any failed
        """
        errors: List[Tuple[str, Exception]] = []
        for name, stream in list(self._streams.items()):
            try:
                stream.flush()
            except Exception as e:
                errors.append((name, e))
        if errors:
            raise DispatchError(errors)

    def close(self) -> None:
        """Close every stream. File streams apply their drop policy."""
        for stream in list(self._streams.values()):
            stream.close()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"OutputRouter(enabled={self._enabled}, "
            f"streams={self.get_stream_names()})"
        )
