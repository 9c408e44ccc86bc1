"""
Discord client and integration module.

This module holds the gateway client and the event handler it dispatches to.
"""

from .client import INTENT_FLAGS, SlimeClient, build_intents
from .handler import EventHandler, PingHandler

__all__ = [
    "EventHandler",
    "INTENT_FLAGS",
    "PingHandler",
    "SlimeClient",
    "build_intents",
]
