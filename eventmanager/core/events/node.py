"""
Event Node - Subscription Record.

One EventNode exists per registered listener. Nodes are created and
mutated only by EventManager; callers read them through
EventManager.get_event_nodes().
"""
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, Tuple

from pydantic import BaseModel


class SubscribeOptions(BaseModel):
    """Per-subscription options accepted by on() and once()."""
    once: bool = False


@dataclass(eq=False)
class EventNode:
    """
    Registry record tying an id, event type, listener, target and once-flag.

    Compared by identity: two nodes with equal fields are still distinct
    subscriptions.
    """
    id: str
    type: Hashable
    listener: Callable[..., Any]
    target: Optional[Any] = None
    once: bool = False

    @property
    def listener_name(self) -> str:
        return getattr(self.listener, "__qualname__", None) or repr(self.listener)

    def matches(self, listener: Callable[..., Any], target: Optional[Any] = None) -> bool:
        """True if this node was registered with this listener and target."""
        return self.listener == listener and self.target is target


# (unsubscribe callback, node id), as returned by on()/once()
OffEventCallback = Callable[[], None]
Subscription = Tuple[OffEventCallback, str]
