"""
Diagnostic snapshot of an EventManager.

The models carry the actual contract (types, counts, ids, once-flags);
format_status() is presentation only.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class EventNodeInfo(BaseModel):
    id: str
    once: bool = False
    listener: str = ""


class EventTypeStatus(BaseModel):
    type: Any
    count: int = 0
    nodes: List[EventNodeInfo] = Field(default_factory=list)


class EventManagerStatus(BaseModel):
    types: List[EventTypeStatus] = Field(default_factory=list)

    @property
    def type_count(self) -> int:
        return len(self.types)

    @property
    def total_count(self) -> int:
        return sum(t.count for t in self.types)

    def get(self, event_type: Any) -> Optional[EventTypeStatus]:
        """Status entry for event_type, or None if it has no subscriptions."""
        for entry in self.types:
            if entry.type == event_type:
                return entry
        return None


def format_status(status: EventManagerStatus) -> str:
    """Render a status snapshot as indented text, one line per node."""
    lines = [
        f"EventManager: {status.type_count} event type(s), "
        f"{status.total_count} subscription(s)"
    ]
    for entry in status.types:
        lines.append(f"  [{entry.type}] {entry.count} subscription(s)")
        for node in entry.nodes:
            flag = " (once)" if node.once else ""
            lines.append(f"    - id={node.id} listener={node.listener}{flag}")
    return "\n".join(lines)
