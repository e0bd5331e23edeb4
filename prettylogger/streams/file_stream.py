"""
Buffered file output stream

Formatted lines are collected in memory and appended to the log file on
flush, either explicitly or once the buffer reaches its maximum size.
"""

from __future__ import annotations

import logging
import weakref
from pathlib import Path
from typing import List, Optional, Tuple, Union

from prettylogger.core.exceptions import LockedError, LogIOError, PathError
from prettylogger.core.log_event import LogEvent
from prettylogger.core.log_level import OnDropPolicy
from prettylogger.formatters.base_formatter import BaseFormatter
from prettylogger.streams.base_stream import OutputStream

_log = logging.getLogger(__name__)

DEFAULT_MAX_BUFFER_SIZE = 128


class _FileState:
    """Mutable state shared between a FileStream and its finalizer."""

    __slots__ = ("path", "buffer", "locked", "on_drop_policy")

    def __init__(self, on_drop_policy: OnDropPolicy):
        self.path: Optional[str] = None
        self.buffer: List[str] = []
        self.locked = False
        self.on_drop_policy = on_drop_policy


def _append_lines(path: str, lines: List[str]) -> None:
    """Append lines to a file in one write. Raises OSError on failure."""
    with open(path, "a", encoding="utf-8") as f:
        f.write("".join(line + "\n" for line in lines))


def _drop_flush(state: _FileState) -> None:
    """
    Apply the drop policy to pending lines.

    Runs once per stream, on close() or when the stream is collected.
    Never raises.
    """
    if not state.buffer:
        return

    pending = len(state.buffer)
    if state.locked and state.on_drop_policy is OnDropPolicy.DISCARD_LOG_BUFFER:
        _log.warning(
            "Log file lock held on close, discarding %d buffered line(s) for %s",
            pending, state.path,
        )
        state.buffer.clear()
        return

    if state.path is None:
        _log.warning("No log file path set, discarding %d buffered line(s)", pending)
        state.buffer.clear()
        return

    try:
        _append_lines(state.path, state.buffer)
        state.buffer.clear()
    except OSError as e:
        _log.error("Failed to flush %d line(s) to %s on close: %s", pending, state.path, e)


class FileStream(OutputStream):
    """
    Write formatted log lines to a file through an in-memory buffer.

    Features:
    - Auto-flush once the buffer holds ``max_buffer_size`` lines
    - Retry-safe flush: lines stay buffered until a write succeeds
    - Advisory, non-blocking file lock; guarded calls raise LockedError
    - Drop policy applied exactly once on close or garbage collection

    Example:
        stream = FileStream()
        stream.set_log_file_path("app.log")
        stream.enable()
        stream.out(LogEvent.info("started"), formatter)
        stream.flush()
    """

    name = "file"

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        max_buffer_size: Optional[int] = DEFAULT_MAX_BUFFER_SIZE,
        on_drop_policy: OnDropPolicy = OnDropPolicy.DISCARD_LOG_BUFFER,
    ):
        """
        Initialize file stream. The stream starts disabled.

        Args:
            path: Log file path (validated if given)
            max_buffer_size: Line count that triggers auto-flush (None disables)
            on_drop_policy: Behavior for pending lines when closed while locked
        """
        super().__init__(enabled=False)
        self._state = _FileState(on_drop_policy)
        self._max_buffer_size: Optional[int] = None
        self.set_max_buffer_size(max_buffer_size)
        if path is not None:
            self.set_log_file_path(path)
        self._finalizer = weakref.finalize(self, _drop_flush, self._state)

    # Configuration

    @property
    def path(self) -> Optional[str]:
        return self._state.path

    @property
    def max_buffer_size(self) -> Optional[int]:
        return self._max_buffer_size

    @property
    def on_drop_policy(self) -> OnDropPolicy:
        return self._state.on_drop_policy

    def set_log_file_path(self, path: Union[str, Path]) -> None:
        """
        Set the log file path.

        The file is opened in append mode to check that it is writable;
        it is created if missing and never truncated.

        Raises:
            PathError: If the path cannot be opened for writing; the
                       previous path is kept
        """
        path_str = str(path)
        _check_writable(path_str)
        self._state.path = path_str

    def set_max_buffer_size(self, size: Optional[int]) -> None:
        """
        Set the auto-flush threshold.

        Args:
            size: Positive line count, or None to only flush explicitly

        Raises:
            ValueError: If size is not positive
        """
        if size is not None and size <= 0:
            raise ValueError("max_buffer_size must be positive or None")
        self._max_buffer_size = size

    def set_on_drop_policy(self, policy: OnDropPolicy) -> None:
        self._state.on_drop_policy = policy

    # Toggling

    def enable(self) -> None:
        """
        Enable the stream.

        Re-enabling a closed stream re-arms the drop policy for the lines
        buffered afterwards.

        Raises:
            PathError: If no path is set or it is not writable
        """
        if self._enabled:
            return
        if self._state.path is None:
            raise PathError("Log file path is not set")
        _check_writable(self._state.path)
        if not self._finalizer.alive:
            self._finalizer = weakref.finalize(self, _drop_flush, self._state)
        self._enabled = True

    # Lock

    def lock_file(self) -> None:
        """Hold the advisory lock; writes fail until unlock_file()."""
        self._state.locked = True

    def unlock_file(self) -> None:
        self._state.locked = False

    def is_locked(self) -> bool:
        return self._state.locked

    # Output

    def out(self, event: LogEvent, formatter: Optional[BaseFormatter] = None) -> None:
        """
        Format the event into the buffer, flushing if the buffer is full.

        Raises:
            LockedError: If the file lock is held; the event is not buffered
            LogIOError: If an auto-flush fails; lines stay buffered
        """
        if not self._enabled:
            return
        if self._state.locked:
            raise LockedError("Log file lock is held")
        if formatter is None:
            raise ValueError("FileStream requires a formatter")

        self._state.buffer.append(formatter.format(event))

        if (
            self._max_buffer_size is not None
            and len(self._state.buffer) >= self._max_buffer_size
        ):
            self.flush()

    def flush(self) -> None:
        """
        Append buffered lines to the log file and clear the buffer.

        Raises:
            LockedError: If the file lock is held
            PathError: If lines are pending but no path is set
            LogIOError: If the file cannot be written; lines stay buffered
        """
        if self._state.locked:
            raise LockedError("Log file lock is held")
        if not self._state.buffer:
            return
        if self._state.path is None:
            raise PathError("Log file path is not set")

        try:
            _append_lines(self._state.path, self._state.buffer)
        except OSError as e:
            raise LogIOError(f"Failed to write log buffer: {e}", self._state.path) from e
        self._state.buffer.clear()

    def get_log_buffer(self) -> Tuple[str, ...]:
        """Pending formatted lines, oldest first."""
        return tuple(self._state.buffer)

    def close(self) -> None:
        """
        Apply the drop policy to pending lines and disable the stream.

        If unlocked, pending lines are flushed. If locked, they are
        flushed only with IGNORE_LOG_FILE_LOCK and discarded otherwise.
        Only the first call after construction or re-enabling has any
        effect on the buffer.
        """
        self._finalizer()
        self._enabled = False

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def __enter__(self) -> "FileStream":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return (
            f"FileStream(enabled={self._enabled}, path={self._state.path!r}, "
            f"pending={len(self._state.buffer)}, locked={self._state.locked})"
        )


def _check_writable(path: str) -> None:
    try:
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as e:
        raise PathError(f"Log file is not writable: {e}", path) from e
