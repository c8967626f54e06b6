from typing import TextIO

from light_bench.logging.handlers.base import BaseLogHandler


class StreamLogHandler(BaseLogHandler):
    """
    A log handler that writes log messages to an open text stream.
    """

    def __init__(self, stream: TextIO) -> None:
        super().__init__()
        self.stream = stream

    def push(self, buffer: list[str]) -> None:
        self.stream.write("\n".join(buffer) + "\n")
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()
