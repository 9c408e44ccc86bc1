"""
Event handling for the slime bot.

The client library owns the event loop and may run several handler calls at
once, so handlers keep no state between events.
"""

import logging
from typing import Protocol

import discord

logger = logging.getLogger(__name__)

PING_COMMAND = "!ping"
PONG_REPLY = "Pong!"


class EventHandler(Protocol):
    """Reacts to the events the Discord client delivers."""

    async def ready(self, ctx: discord.Client, user: discord.ClientUser) -> None:
        """Called once the gateway session is established."""
        ...

    async def message(self, ctx: discord.Client, message: discord.Message) -> None:
        """Called for every message the bot can see."""
        ...


class PingHandler:
    """Answers ``!ping`` with ``Pong!`` in the channel it came from."""

    async def ready(self, ctx: discord.Client, user: discord.ClientUser) -> None:
        logger.info(f"{user.display_name} is connected!")

    async def message(self, ctx: discord.Client, message: discord.Message) -> None:
        if message.content != PING_COMMAND:
            return

        # Sending can fail on network errors, missing permissions or rate
        # limits. One failed reply must not take the bot down.
        try:
            await message.channel.send(PONG_REPLY)
        except Exception as e:
            logger.error(f"Error sending message: {e!r}")
