"""Exception types raised by the fan-out core."""


class FanoutError(Exception):
    """Base class for errors raised while wiring sinks to a builder."""


class UnsupportedSinkError(FanoutError):
    """Raised when the message builder has no construction path for a sink type."""

    def __init__(self, sink_type: type) -> None:
        self.sink_type = sink_type
        super().__init__(f"No message factory registered for sink type {sink_type.__name__!r}")


class MessageTypeMismatchError(FanoutError):
    """Raised when a factory produces a message the sink cannot consume."""

    def __init__(self, sink_type: type, expected: type, produced: type) -> None:
        self.sink_type = sink_type
        self.expected = expected
        self.produced = produced
        super().__init__(
            f"Sink {sink_type.__name__!r} consumes {expected.__name__}, "
            f"but its factory builds {produced.__name__}"
        )


class LevelInvariantError(AssertionError):
    """Raised for a level outside the valid range.

    This is a programming defect, not a recoverable condition. Nothing in the
    package catches it.
    """
