"""
EventManager - Synchronous In-Process Pub/Sub Registry.

Listeners are registered against hashable event keys and invoked in
registration order by emit(). Every subscription is indexed twice, by
event type and by a generated id, and both indexes always hold the same
EventNode objects.

Usage:
    events = EventManager()

    off, node_id = events.on("work", on_work)
    events.once("sleep", on_sleep, target=player)

    events.emit("work", "Alice", 30)

    off()                  # or events.off(node_id)
    events.off_all("sleep")
"""
import inspect
from types import MethodType
from typing import Any, Callable, Dict, Generic, Hashable, List, Mapping, Optional, Tuple, TypeVar, Union

from loguru import logger

from ..config import ManagerSettings
from .node import EventNode, SubscribeOptions, Subscription
from .status import EventManagerStatus, EventNodeInfo, EventTypeStatus, format_status

K = TypeVar('K', bound=Hashable)

OptionsLike = Union[SubscribeOptions, Mapping[str, Any], None]


class EventManager(Generic[K]):
    """
    Registry of listeners keyed by event type.

    Not-found conditions (unknown id, unmatched listener, unknown type) are
    silent no-ops. Exceptions raised by listeners propagate out of emit().
    """

    def __init__(self, settings: Optional[ManagerSettings] = None):
        self.settings = settings or ManagerSettings()
        self._id = 0
        self._nodes_by_type: Dict[K, List[EventNode]] = {}
        self._node_by_id: Dict[str, EventNode] = {}

    def generate_id(self) -> str:
        """Return the next subscription id. Ids are never reused."""
        node_id = str(self._id)
        self._id += 1
        return node_id

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def on(
        self,
        type: K,
        listener: Callable[..., Any],
        target: Optional[Any] = None,
        options: OptionsLike = None,
    ) -> Subscription:
        """
        Register a listener for an event type.

        Args:
            type: Event key
            listener: Callable invoked with the emit() arguments
            target: Optional context the listener is bound to when invoked
            options: SubscribeOptions or a mapping of its fields

        Returns:
            (off callback, node id). The callback removes exactly this
            subscription and is a no-op once it is gone.
        """
        opts = self._resolve_options(options)
        node = EventNode(
            id=self.generate_id(),
            type=type,
            listener=listener,
            target=target,
            once=opts.once,
        )
        self._register(node)

        def off() -> None:
            self.off_by_id(node.id)

        return off, node.id

    def once(
        self,
        type: K,
        listener: Callable[..., Any],
        target: Optional[Any] = None,
        options: OptionsLike = None,
    ) -> Subscription:
        """Like on(), but the subscription is removed right before it first fires."""
        opts = self._resolve_options(options).model_copy(update={"once": True})
        return self.on(type, listener, target, opts)

    @staticmethod
    def _resolve_options(options: OptionsLike) -> SubscribeOptions:
        if options is None:
            return SubscribeOptions()
        if isinstance(options, SubscribeOptions):
            return options
        return SubscribeOptions.model_validate(dict(options))

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def off(self, type_or_id: Union[K, str], listener: Optional[Callable[..., Any]] = None, target: Optional[Any] = None) -> None:
        """
        Remove a subscription.

        off(node_id) removes by id. off(type, listener, target=None) removes
        the first subscription of `type` registered with that listener and
        target.
        """
        if listener is None and isinstance(type_or_id, str):
            self.off_by_id(type_or_id)
            return
        self.off_listener(type_or_id, listener, target)

    def off_by_id(self, node_id: str) -> None:
        node = self._node_by_id.get(node_id)
        if node is None:
            return
        self._unregister(node)

    def off_listener(self, type: K, listener: Callable[..., Any], target: Optional[Any] = None) -> None:
        """Remove only the first match, in registration order."""
        nodes = self._nodes_by_type.get(type)
        if not nodes:
            return

        for node in nodes:
            if node.matches(listener, target):
                self._unregister(node)
                return

    def off_all(self, type: Optional[K] = None) -> None:
        """
        Remove every subscription of `type`, or of every type when omitted.

        None always means "every type", so subscriptions keyed by None are
        only removed by the full clear.
        """
        if type is None:
            self._nodes_by_type.clear()
            self._node_by_id.clear()
            logger.debug("EventManager cleared all subscriptions")
            return

        nodes = self._nodes_by_type.pop(type, None)
        if not nodes:
            return

        for node in nodes:
            self._node_by_id.pop(node.id, None)
        logger.debug(f"Removed {len(nodes)} subscription(s) for {type!r}")

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def emit(self, type: K, *args: Any) -> None:
        """
        Invoke every listener of `type` with args, in registration order.

        Delivery iterates over a snapshot taken before the first listener
        runs, so listeners may subscribe or unsubscribe freely. A node removed
        during this emit is skipped; a node added during it is not reached.
        """
        nodes = self._nodes_by_type.get(type)
        if not nodes:
            return

        snapshot = list(nodes)
        if self.settings.log_emits:
            logger.debug(f"Emitting {type!r} to {len(snapshot)} listener(s)")

        for node in snapshot:
            if node.id not in self._node_by_id:
                continue

            if node.once:
                self._unregister(node)

            try:
                self._invoke(node, args)
            except Exception as e:
                logger.error(f"Error in listener {node.listener_name} for {type!r}: {e}")
                raise

    @staticmethod
    def _invoke(node: EventNode, args: Tuple[Any, ...]) -> None:
        if node.target is not None and not inspect.ismethod(node.listener):
            MethodType(node.listener, node.target)(*args)
        else:
            node.listener(*args)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_event_nodes(self, type: K) -> Tuple[EventNode, ...]:
        """Current subscriptions for `type` (empty if none), as an immutable copy."""
        return tuple(self._nodes_by_type.get(type, ()))

    def get_status(self) -> EventManagerStatus:
        """Structured snapshot of every registered type and its subscriptions."""
        return EventManagerStatus(
            types=[
                EventTypeStatus(
                    type=event_type,
                    count=len(nodes),
                    nodes=[
                        EventNodeInfo(id=node.id, once=node.once, listener=node.listener_name)
                        for node in nodes
                    ],
                )
                for event_type, nodes in self._nodes_by_type.items()
            ]
        )

    def get_status_info(self) -> str:
        """Human-readable summary of get_status()."""
        return format_status(self.get_status())

    def __contains__(self, type: object) -> bool:
        return type in self._nodes_by_type

    def __len__(self) -> int:
        return len(self._node_by_id)

    # ------------------------------------------------------------------
    # Index maintenance
    # ------------------------------------------------------------------

    def _register(self, node: EventNode) -> None:
        self._nodes_by_type.setdefault(node.type, []).append(node)
        self._node_by_id[node.id] = node
        logger.debug(f"Subscribed {node.listener_name} to {node.type!r} (id={node.id}, once={node.once})")

    def _unregister(self, node: EventNode) -> None:
        nodes = self._nodes_by_type.get(node.type)
        if nodes is None:
            return

        try:
            nodes.remove(node)
        except ValueError:
            return

        if not nodes:
            del self._nodes_by_type[node.type]

        del self._node_by_id[node.id]
        logger.debug(f"Unsubscribed {node.listener_name} from {node.type!r} (id={node.id})")
