from fanout.sinks.base import LogSink, StreamSink
from fanout.sinks.can import CanLogger
from fanout.sinks.file import FileLogger

__all__ = ["CanLogger", "FileLogger", "LogSink", "StreamSink"]
