"""
eventmanager - typed in-process publish/subscribe registry.

Usage:
    from eventmanager import EventManager

    events = EventManager()
    off, node_id = events.on("work", lambda name, minutes: ...)
    events.emit("work", "Alice", 30)
"""
from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "1.0.0"
