"""
Main Discord client implementation.

This connects a single gateway shard and forwards the events it receives to an
``EventHandler``. Reconnection and backoff are left to discord.py.
"""

import logging
from typing import Optional

import discord

from .handler import EventHandler, PingHandler

logger = logging.getLogger(__name__)

INTENT_FLAGS = frozenset({"guild_messages", "dm_messages", "message_content"})


def build_intents() -> discord.Intents:
    """Gateway intents with exactly ``INTENT_FLAGS`` enabled."""
    return discord.Intents(**{flag: True for flag in INTENT_FLAGS})


class SlimeClient(discord.Client):
    """Discord client that dispatches ready and message events to a handler."""

    def __init__(self, handler: Optional[EventHandler] = None):
        super().__init__(intents=build_intents())
        self.handler: EventHandler = handler or PingHandler()

        logger.debug("🤖 Discord client initialized")

    async def cleanup(self) -> None:
        """Close the gateway connection if it is still open."""
        logger.debug("🧹 Cleaning up Discord client resources...")

        try:
            if not self.is_closed():
                await self.close()
        except Exception as e:
            logger.error(f"❌ Error during Discord client cleanup: {e}")

    # =============================================================================
    # DISCORD EVENT HANDLERS
    # =============================================================================

    async def on_ready(self) -> None:
        """Called when the shard receives its READY payload."""
        if self.user is None:
            logger.error("Bot user is not available")
            return

        await self.handler.ready(self, self.user)

    async def on_message(self, message: discord.Message) -> None:
        """Handle incoming Discord messages."""
        await self.handler.message(self, message)

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        """Handle errors escaping an event handler."""
        logger.exception(f"Discord client error in {event_method}")
