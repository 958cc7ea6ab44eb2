"""Telegram Bot API adapter."""

import asyncio
from typing import Sequence
from telegram import Bot
from ..errors import MessagingError
from ..interfaces import IMessagingProvider


class TelegramBotAdapter:
    """Adapter sending alerts as Telegram chat messages.

    Recipients are chat ids. Each send runs its own event loop, since
    log writes happen synchronously on request threads.
    """

    def __init__(self, bot_token: str):
        self.bot_token = bot_token

    async def _send_all(self, recipients: Sequence[str], body: str) -> None:
        async with Bot(token=self.bot_token) as bot:
            for chat_id in recipients:
                await bot.send_message(chat_id=chat_id, text=body)

    def send_text(self, recipients: Sequence[str], body: str) -> None:
        """Send text message to every chat."""
        if not recipients:
            raise MessagingError("no recipients")
        asyncio.run(self._send_all(recipients, body))
