from typing import ClassVar

from fanout.base.messages import CanMessage
from fanout.sinks.base import StreamSink


class CanLogger(StreamSink):
    """Frame sink; prints the frame identifier and its data array."""

    message_type = CanMessage
    name: ClassVar[str] = "can logger"

    def render(self, message: CanMessage) -> str:
        return f"can id: {message.can_id}, data: {list(message.data)}"
