import sys
from loguru import logger

from eventmanager import ConfigManager, EventManager, EventTypes, setup_logging


class EventType(EventTypes):
    WORK = "work"
    SLEEP = "sleep"


class Worker:
    def __init__(self, title: str):
        self.title = title


def on_work(name: str, minutes: int):
    print(f"{name} starts working, duration: {minutes} minutes.")


def on_work_with_target(self: Worker, name: str, minutes: int):
    print(f"[{self.title}] {name} starts working, duration: {minutes} minutes.")


def main(config_path: str = "eventmanager.json"):
    config = ConfigManager(config_path)
    setup_logging(config.data.logging)

    events = EventManager(config.data.manager)

    print("--- 1. Register ---")
    events.on(EventType.WORK, on_work)
    events.on(EventType.WORK, on_work_with_target, Worker("Engineer"))

    off_sleep, sleep_id = events.once(
        EventType.SLEEP,
        lambda name, minutes: print(f"{name} starts sleeping, duration: {minutes} minutes."),
    )
    logger.info(f"Sleep subscription id: {sleep_id}")
    print(events.get_status_info())

    print("--- 2. Emit ---")
    events.emit(EventType.WORK, "Alice", 30)
    events.emit(EventType.SLEEP, "Bob", 15)
    events.emit(EventType.SLEEP, "Bob", 15)  # once: already removed

    print("--- 3. Unregister ---")
    off_sleep()
    events.off(EventType.WORK, on_work)
    print(events.get_status_info())

    events.off_all()
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:]))
