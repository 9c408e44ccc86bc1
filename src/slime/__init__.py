"""
Slime Bot Package

A minimal Discord bot that answers ``!ping`` with ``Pong!``.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
