import json
import pytest
from loguru import logger

from eventmanager.core.config import ConfigManager, EventManagerConfig, ManagerSettings
from eventmanager.core.events import EventManager
from eventmanager.core.logging import setup_logging


def test_config_defaults(tmp_path):
    config = ConfigManager(str(tmp_path / "missing.json"))

    assert config.data == EventManagerConfig()
    assert config.data.manager.log_emits is False
    assert config.data.logging.debug_mode is False


def test_config_load_json(tmp_path):
    path = tmp_path / "eventmanager.json"
    path.write_text(json.dumps({"manager": {"log_emits": True}, "logging": {"debug_mode": True}}))

    config = ConfigManager(str(path))

    assert config.get("manager", "log_emits") is True
    assert config.get("logging", "debug_mode") is True


def test_config_load_toml(tmp_path):
    path = tmp_path / "eventmanager.toml"
    path.write_text('[manager]\nlog_emits = true\n\n[logging]\nlog_dir = "out"\n')

    config = ConfigManager(str(path))

    assert config.data.manager.log_emits is True
    assert config.data.logging.log_dir == "out"


def test_config_invalid_file_falls_back(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    config = ConfigManager(str(path))

    assert config.data == EventManagerConfig()
    assert "Failed to load config" in caplog.text


def test_config_update_and_save(tmp_path):
    path = tmp_path / "nested" / "eventmanager.json"
    config = ConfigManager(str(path))

    config.update("manager", "log_emits", True)
    config.save()

    assert json.loads(path.read_text())["manager"]["log_emits"] is True
    assert ConfigManager(str(path)).data.manager.log_emits is True


def test_config_update_invalid_keys(tmp_path):
    config = ConfigManager(str(tmp_path / "missing.json"))

    with pytest.raises(ValueError, match="Invalid section"):
        config.update("nope", "log_emits", True)
    with pytest.raises(ValueError, match="Invalid key"):
        config.update("manager", "nope", True)


def test_manager_uses_settings(tmp_path):
    path = tmp_path / "eventmanager.json"
    path.write_text(json.dumps({"manager": {"log_emits": True}}))

    events = EventManager(ConfigManager(str(path)).data.manager)

    assert events.settings == ManagerSettings(log_emits=True)


def test_setup_logging_file_sink(tmp_path):
    config = ConfigManager(str(tmp_path / "missing.json"))
    config.update("logging", "log_to_file", True)
    config.update("logging", "log_dir", str(tmp_path / "logs"))

    try:
        setup_logging(config.data.logging)
        logger.info("hello")
        logger.complete()
        log_files = list((tmp_path / "logs").glob("eventmanager_*.log"))
        assert len(log_files) == 1
        assert "hello" in log_files[0].read_text()
    finally:
        logger.remove()


@pytest.mark.parametrize("log_emits", [True, False])
def test_log_emits_reaches_debug_file_sink(tmp_path, log_emits):
    path = tmp_path / "eventmanager.json"
    path.write_text(json.dumps({
        "logging": {"debug_mode": True, "log_to_file": True, "log_dir": str(tmp_path / "logs")},
        "manager": {"log_emits": log_emits},
    }))
    config = ConfigManager(str(path))

    try:
        setup_logging(config.data.logging)
        events = EventManager(config.data.manager)
        events.on("work", lambda name, minutes: None)
        events.emit("work", "Alice", 30)
        logger.complete()
        (log_file,) = (tmp_path / "logs").glob("eventmanager_*.log")
        text = log_file.read_text()
    finally:
        logger.remove()

    assert "Subscribed" in text
    assert ("Emitting 'work' to 1 listener(s)" in text) is log_emits
