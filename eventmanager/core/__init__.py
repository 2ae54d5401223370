"""
Event Manager Core.

Provides:
- EventManager: Synchronous pub/sub registry
- ConfigManager: Configuration loaded from JSON/TOML
- setup_logging: Loguru sink configuration
"""
from .config import ConfigManager, EventManagerConfig, LoggingSettings, ManagerSettings
from .logging import setup_logging
from .events import (
    EventManager,
    EventNode,
    SubscribeOptions,
    OffEventCallback,
    Subscription,
    EventTypes,
    EventManagerStatus,
    EventTypeStatus,
    EventNodeInfo,
    format_status,
)

__all__ = [
    # Events
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

    # Configuration
    "ConfigManager",
    "EventManagerConfig",
    "LoggingSettings",
    "ManagerSettings",

    # Logging
    "setup_logging",
]
