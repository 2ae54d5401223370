"""
Event Type Constants.

Declare event keys as class attributes instead of scattering string
literals, which keeps renames safe.

Usage:
    from eventmanager import EventTypes

    class GameEvents(EventTypes):
        WORK = "work"
        SLEEP = "sleep"

    events.on(GameEvents.WORK, on_work)
"""
from typing import Dict, Hashable, List


class EventTypes:
    """
    Base class for a group of event key constants.

    Public upper-case class attributes are treated as event keys.
    """

    @classmethod
    def members(cls) -> Dict[str, Hashable]:
        """Map of constant name to event key, base classes first."""
        found: Dict[str, Hashable] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if name.isupper() and not name.startswith("_"):
                    found[name] = value
        return found

    @classmethod
    def values(cls) -> List[Hashable]:
        return list(cls.members().values())

    @classmethod
    def contains(cls, event_type: Hashable) -> bool:
        return event_type in cls.values()
