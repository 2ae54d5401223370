"""
Event System - In-Process Pub/Sub Registry.

Provides:
- EventManager: Registry of listeners keyed by event type
- EventNode: Subscription record (id, type, listener, target, once)
- SubscribeOptions: Options accepted by on()/once()
- EventTypes: Base class for event key constants
- EventManagerStatus: Diagnostic snapshot returned by get_status()

Usage:
    from eventmanager.core.events import EventManager

    events = EventManager()
    off, node_id = events.on("work", on_work)
    events.emit("work", "Alice", 30)
    off()
"""
from .node import EventNode, SubscribeOptions, OffEventCallback, Subscription
from .manager import EventManager
from .constants import EventTypes
from .status import EventManagerStatus, EventTypeStatus, EventNodeInfo, format_status


__all__ = [
    "EventManager",
    "EventNode",
    "SubscribeOptions",
    "OffEventCallback",
    "Subscription",
    "EventTypes",
    "EventManagerStatus",
    "EventTypeStatus",
    "EventNodeInfo",
    "format_status",
]
