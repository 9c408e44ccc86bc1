"""
Main entry point for the slime bot.
Handles startup, graceful shutdown, and error handling.
"""

import asyncio
import logging
import signal
import sys
from typing import Optional, Set

from slime.config import load_logging_settings, load_settings
from slime.discord.client import INTENT_FLAGS, SlimeClient
from slime.discord.handler import EventHandler
from slime.exceptions import ClientError, ConfigError, SlimeError
from slime.utils.logging import TRACE, setup_logging

logger = logging.getLogger(__name__)


def _token_failed(error: ConfigError) -> bool:
    """Whether DISCORD_TOKEN is among the settings that failed validation."""
    return any(
        str(part).lower() == "discord_token"
        for err in error.cause.errors()
        for part in err["loc"]
    )


class BotApplication:
    """Main application class that manages the bot lifecycle."""

    def __init__(self, handler: Optional[EventHandler] = None):
        self.handler = handler
        self.client: Optional[SlimeClient] = None
        self.shutdown_tasks: Set[asyncio.Task] = set()

    async def startup(self) -> None:
        """
        Read the token, build the client and log in.

        Raises:
            ConfigError: the token could not be read. No client is created.
            ClientError: the client could not be created or the token was
                rejected. The event loop is not started.
        """
        logger.log(TRACE, "Beginning everything. Now retrieving the DISCORD_TOKEN...")

        try:
            settings = load_settings()
        except ConfigError as e:
            if _token_failed(e):
                logger.error(f"❌ Couldn't retrieve the token: {e.cause}")
            else:
                logger.error(f"❌ Invalid configuration: {e.cause}")
            raise

        logger.log(TRACE, f"Intents selected: {sorted(INTENT_FLAGS)}")

        try:
            self.client = SlimeClient(handler=self.handler)
            logger.debug("🔑 Logging in to Discord...")
            await self.client.login(settings.discord_token.get_secret_value())
        except Exception as e:
            logger.error(f"❌ Error occurred while creating client: {e!r}")
            await self.cleanup()
            raise ClientError(e) from e

        logger.info("✅ Bot startup complete!")

    async def run(self) -> None:
        """Run the bot until the connection closes."""
        await self.startup()

        try:
            # A single shard; discord.py reconnects with backoff on its own.
            await self.client.connect()
        except Exception as e:
            logger.error(f"❌ Client error: {e!r}")
            raise ClientError(e) from e
        finally:
            await self.cleanup()

    async def shutdown(self) -> None:
        """Ask a running client to disconnect."""
        logger.info("🛑 Shutting down...")
        await self.cleanup()

    async def cleanup(self) -> None:
        """Clean up resources on shutdown."""
        if self.client:
            await self.client.cleanup()


def setup_signal_handlers(app: BotApplication) -> None:
    """Setup graceful shutdown on SIGINT/SIGTERM."""
    loop = asyncio.get_running_loop()

    def signal_handler(signum: int) -> None:
        logger.info(f"Received signal {signum}, initiating shutdown...")
        task = loop.create_task(app.shutdown())
        app.shutdown_tasks.add(task)
        task.add_done_callback(app.shutdown_tasks.discard)

    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(signum, signal_handler, signum)
        except (NotImplementedError, RuntimeError):
            # Not supported on this platform; Ctrl+C still raises KeyboardInterrupt.
            pass


async def main(log_level: Optional[str] = None) -> None:
    """Main entry point."""
    setup_logging(log_level or load_logging_settings().effective_log_level)

    try:
        app = BotApplication()
        setup_signal_handlers(app)
        await app.run()
    except KeyboardInterrupt:
        logger.info("🛑 Bot stopped by user")
    except SlimeError as e:
        logger.error(f"💥 Fatal error: {e}")
        sys.exit(1)


def sync_main(log_level: Optional[str] = None) -> None:
    """Synchronous wrapper for main() - used by script entry point."""
    try:
        asyncio.run(main(log_level))
    except KeyboardInterrupt:
        pass


# Entry points
if __name__ == "__main__":
    sync_main()


def run_bot() -> None:
    """Entry point for `slime-bot`."""
    sync_main()


def run_dev() -> None:
    """Entry point for development with debug logging."""
    import os

    os.environ.setdefault("SLIME_ENVIRONMENT", "development")
    os.environ.setdefault("SLIME_LOG_LEVEL", "DEBUG")
    sync_main()
