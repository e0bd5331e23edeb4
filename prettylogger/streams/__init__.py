"""
Output streams module

Provides the destinations a Logger routes events to.
"""

from prettylogger.streams.base_stream import OutputStream
from prettylogger.streams.stderr_stream import StderrStream
from prettylogger.streams.buffer_stream import BufferStream
from prettylogger.streams.file_stream import FileStream

__all__ = [
    "OutputStream",
    "StderrStream",
    "BufferStream",
    "FileStream",
]
