"""Message builder: turns one payload into the message a sink type expects.

Construction paths are registered per sink type. Adding a sink kind means
registering a new factory with :meth:`MessageBuilder.register`; the paths for
existing kinds are never touched.
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Type

from fanout.base.errors import MessageTypeMismatchError, UnsupportedSinkError
from fanout.base.messages import CanMessage, FormatMessage
from fanout.base.payload import InputData
from fanout.sinks import CanLogger, FileLogger

DEFAULT_CAN_ID = 10
INPUT_DATA_FORMAT = "input data: length: {}, width: {}, height: {}"


@dataclass(frozen=True)
class MessageFactory:
    """A registered construction path.

    Attributes:
        builds: Message class the factory produces.
        fn: Callable taking ``(builder, payload)`` and returning the message.
    """

    builds: Type[Any]
    fn: Callable[["MessageBuilder", InputData], Any]


class MessageBuilder:
    """Stateless factory for per-sink messages.

    Args:
        can_id: Identifier stamped on every frame message this builder creates.

    Example:
        >>> builder = MessageBuilder(can_id=10)
        >>> builder.create(InputData(1, 2, 3), CanLogger).data
        (1, 2, 3, 0, 0, 0)
    """

    _factories: ClassVar[Dict[type, MessageFactory]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Subclasses extend a copy so their paths never leak into the parent.
        cls._factories = dict(cls._factories)

    def __init__(self, can_id: int = DEFAULT_CAN_ID) -> None:
        self._can_id = can_id

    @property
    def can_id(self) -> int:
        return self._can_id

    @classmethod
    def register(cls, sink_type: type, *, builds: Type[Any]) -> Callable:
        """Decorator registering the construction path for ``sink_type``.

        Args:
            sink_type: Sink class the factory builds messages for.
            builds: Message class the factory returns.

        Returns:
            Decorator that stores the factory and returns it unchanged.
        """

        def decorator(fn: Callable[["MessageBuilder", InputData], Any]) -> Callable:
            cls._factories[sink_type] = MessageFactory(builds=builds, fn=fn)
            return fn

        return decorator

    @classmethod
    def resolve(cls, sink_type: type) -> MessageFactory:
        """Find and check the construction path for a sink type.

        The sink's class hierarchy is searched, so subclasses of a registered
        sink reuse its path.

        Raises:
            UnsupportedSinkError: No factory is registered for the type.
            MessageTypeMismatchError: The factory builds a message class the
                sink does not declare as its ``message_type``.
        """
        for klass in getattr(sink_type, "__mro__", (sink_type,)):
            factory = cls._factories.get(klass)
            if factory is not None:
                break
        else:
            raise UnsupportedSinkError(sink_type)
        expected = getattr(sink_type, "message_type", None)
        if expected is None or factory.builds is not expected:
            raise MessageTypeMismatchError(sink_type, expected or type(None), factory.builds)
        return factory

    @classmethod
    def supports(cls, sink_type: type) -> bool:
        try:
            cls.resolve(sink_type)
        except (UnsupportedSinkError, MessageTypeMismatchError):
            return False
        return True

    def create(self, payload: InputData, sink_type: type) -> Any:
        """Build the message ``sink_type`` consumes from ``payload``."""
        return self.resolve(sink_type).fn(self, payload)


@MessageBuilder.register(CanLogger, builds=CanMessage)
def _can_message(builder: MessageBuilder, payload: InputData) -> CanMessage:
    return CanMessage.pad(builder.can_id, [payload.length, payload.width, payload.height])


@MessageBuilder.register(FileLogger, builds=FormatMessage)
def _format_message(builder: MessageBuilder, payload: InputData) -> FormatMessage:
    return FormatMessage(
        template=INPUT_DATA_FORMAT,
        values=(payload.length, payload.width, payload.height),
    )
