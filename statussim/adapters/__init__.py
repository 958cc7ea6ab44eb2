"""Adapter implementations for status simulator."""

from .stdout_adapter import StdoutAdapter
from .file_adapter import FileAdapter
from .alert_adapter import AlertAdapter, truncate_message
from .messagebird_adapter import MessageBirdAdapter
from .telegram_bot_adapter import TelegramBotAdapter

__all__ = [
    'StdoutAdapter',
    'FileAdapter',
    'AlertAdapter',
    'truncate_message',
    'MessageBirdAdapter',
    'TelegramBotAdapter',
]
