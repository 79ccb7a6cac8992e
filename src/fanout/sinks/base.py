"""Sink capability shared by all log sinks."""

import logging
import sys
import threading
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Protocol, TextIO, Type

from fanout.base.levels import Level, level_name

logger = logging.getLogger("fanout.sinks")


class LogSink(Protocol):
    """Protocol for sinks that consume one message shape.

    ``message_type`` names the message class the sink accepts. The message
    builder uses it to check, once at wiring time, that it builds the right
    shape for this sink.
    """

    message_type: ClassVar[Type[Any]]

    def log(self, level: Level, message: Any) -> None:
        """Emit a message at the given level. Must not raise emission errors."""
        ...


class StreamSink(ABC):
    """Base class for sinks that write one rendered line per message to a text stream.

    Subclasses implement :meth:`render`; the base itself cannot be created.

    Args:
        stream: Output stream. Defaults to ``sys.stdout`` looked up at write
            time, so redirection of stdout is honoured.
    """

    message_type: ClassVar[Type[Any]] = object
    name: ClassVar[str] = "stream logger"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @abstractmethod
    def render(self, message: Any) -> str:
        """Render the message body that follows the level and sink name."""

    def log(self, level: Level, message: Any) -> None:
        prefix = level_name(level)
        try:
            line = f"{prefix}: {self.name}: {self.render(message)}"
            self._write(line)
        except Exception:
            # Emission failures stay inside the sink.
            logger.warning("%s failed to emit a %s message", self.name, prefix, exc_info=True)

    def _is_open(self) -> bool:
        return True

    def _write(self, line: str) -> None:
        with self._lock:
            # Writes after close are dropped.
            if not self._is_open():
                return
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(line)
            stream.write("\n")
            stream.flush()
