"""Interface definitions for status simulator adapters."""

from .i_log_sink import ILogSink
from .i_log_destination import ILogDestination, Level, LogEvent
from .i_messaging_provider import IMessagingProvider
from .i_route_handler import IRouteHandler, Response

__all__ = [
    'ILogSink',
    'ILogDestination',
    'Level',
    'LogEvent',
    'IMessagingProvider',
    'IRouteHandler',
    'Response',
]
