from .base import BaseLogHandler as BaseLogHandler
from .file import FileLogHandler as FileLogHandler
from .stream import StreamLogHandler as StreamLogHandler

__all__ = [
    "BaseLogHandler",
    "FileLogHandler",
    "StreamLogHandler",
]
