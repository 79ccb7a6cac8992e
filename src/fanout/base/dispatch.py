"""Fan-out dispatch of one payload to a fixed set of sinks.

A :class:`Component` binds its sinks once, at construction, and checks that the
message builder has a construction path for every one of them. ``process``
then builds and delivers exactly one message per sink, in registration order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union

import uuid_utils as uuid

from fanout.base.builder import MessageBuilder
from fanout.base.config import ComponentConfig
from fanout.base.errors import LevelInvariantError
from fanout.base.levels import Level, level_name
from fanout.base.payload import InputData
from fanout.sinks.base import LogSink

logger = logging.getLogger("fanout.dispatch")


def log(
    level: Union[Level, int],
    payload: InputData,
    builder: MessageBuilder,
    sinks: Sequence[LogSink],
) -> None:
    """Build and deliver one message per sink, in order.

    Args:
        level: Severity for every emission.
        payload: Event to render.
        builder: Message builder used for every sink.
        sinks: Sinks to deliver to.

    Raises:
        LevelInvariantError: If ``level`` is invalid. Raised before any sink
            is invoked.
        UnsupportedSinkError: If a sink has no construction path. Raised
            before any sink is invoked.
        MessageTypeMismatchError: If a factory builds the wrong message class
            for a sink. Raised before any sink is invoked.
    """
    level_name(level)
    sinks = list(sinks)
    factories = [builder.resolve(type(sink)) for sink in sinks]
    messages = [factory.fn(builder, payload) for factory in factories]
    for sink, message in zip(sinks, messages):
        _deliver(sink, level, message)


def _deliver(sink: LogSink, level: Union[Level, int], message: Any) -> None:
    try:
        sink.log(level, message)
    except LevelInvariantError:
        raise
    except Exception:
        # A failing sink never stops the remaining ones.
        logger.warning("sink %r raised while logging", sink, exc_info=True)


@dataclass(frozen=True)
class _Binding:
    sink: LogSink
    build: Callable[[MessageBuilder, InputData], Any]


class Component:
    """Owner of one message builder and a fixed, ordered set of sinks.

    Sinks are referenced, not owned: discarding a component never closes them.

    Args:
        *sinks: Sinks to deliver to, in order. At least one is required and
            types may repeat.
        builder: Message builder. Built from ``config.can_id`` if omitted.
        config: Component settings. Defaults to ``ComponentConfig()``.

    Raises:
        ValueError: If no sinks are given.
        UnsupportedSinkError: If the builder cannot build for a sink type.
        MessageTypeMismatchError: If a factory builds the wrong message class
            for a sink.

    Example:
        >>> component = Component(CanLogger(), FileLogger())
        >>> component.process(InputData(1, 2, 3))
    """

    def __init__(
        self,
        *sinks: LogSink,
        builder: Optional[MessageBuilder] = None,
        config: Optional[ComponentConfig] = None,
    ) -> None:
        if not sinks:
            raise ValueError("a component needs at least one sink")
        self._config = config or ComponentConfig()
        self._builder = builder or MessageBuilder(self._config.can_id)
        self._sinks: Tuple[LogSink, ...] = tuple(sinks)
        self._bindings = tuple(
            _Binding(sink=sink, build=self._builder.resolve(type(sink)).fn) for sink in self._sinks
        )
        self.component_id = str(uuid.uuid7())
        logger.debug(
            "component %s bound to %s",
            self.component_id,
            ", ".join(type(s).__name__ for s in self._sinks),
        )

    @property
    def sinks(self) -> Tuple[LogSink, ...]:
        return self._sinks

    @property
    def builder(self) -> MessageBuilder:
        return self._builder

    @property
    def config(self) -> ComponentConfig:
        return self._config

    def process(self, payload: InputData, level: Optional[Union[Level, int]] = None) -> None:
        """Deliver ``payload`` to every sink at ``level``.

        Every sink is invoked exactly once, in registration order. All
        messages are built before the first sink is invoked, so a failing
        factory leaves every sink untouched. Sink failures are logged and
        swallowed.

        Args:
            payload: Event to render.
            level: Severity; defaults to ``config.default_level``.

        Raises:
            LevelInvariantError: If ``level`` is invalid.
        """
        level = self._config.default_level if level is None else level
        name = level_name(level)
        logger.debug("component %s dispatching %s to %d sinks", self.component_id, name, len(self._bindings))
        messages = [binding.build(self._builder, payload) for binding in self._bindings]
        for binding, message in zip(self._bindings, messages):
            _deliver(binding.sink, level, message)
