import logging
from typing import ClassVar, Optional, TextIO

from fanout.base.messages import FormatMessage
from fanout.sinks.base import StreamSink

logger = logging.getLogger("fanout.sinks")


class FileLogger(StreamSink):
    """Formatted-text sink; substitutes message values into the template.

    Writes to ``stream`` (stdout by default). Use :meth:`open` to append to a
    file instead; the handle is then owned by the sink and released by
    :meth:`close`.
    """

    message_type = FormatMessage
    name: ClassVar[str] = "file logger"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream)
        self._owns_stream = False
        self._closed = False

    @classmethod
    def open(cls, path: str) -> "FileLogger":
        # Open-once; keep the file handle for the sink lifetime.
        sink = cls(open(path, "a", encoding="utf-8"))
        sink._owns_stream = True
        return sink

    def render(self, message: FormatMessage) -> str:
        return message.render()

    def _is_open(self) -> bool:
        return not self._closed

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._owns_stream and self._stream is not None:
                try:
                    self._stream.close()
                except Exception:
                    logger.warning("file logger failed to close its stream", exc_info=True)

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
