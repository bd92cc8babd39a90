# tests/test_config_and_log.py
import io
import json

import pytest

from emoji_registry.utils.config_manager import DEFAULTS, Config
from emoji_registry.utils.logger_utils import Log, configure_logging, log


def test_defaults_without_file(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    assert cfg.get("base_url") == "/emoji"
    assert cfg.get("reference_data") is None
    assert not path.exists()


def test_create_writes_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    Config(str(path), create=True)
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_file_overrides_and_keeps_unknown_keys(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"emoji_dir": "/srv/emoji", "extra": 1}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("emoji_dir") == "/srv/emoji"
    assert cfg.get("extra") == 1
    assert cfg.get("default_tag") == "Custom"


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg.set("log_color", "false")
    cfg.set("extensions", ".png, .gif")
    cfg.set("base_url", "/custom")
    saved = json.loads(path.read_text(encoding="utf8"))
    assert saved["log_color"] is False
    assert saved["extensions"] == [".png", ".gif"]
    assert saved["base_url"] == "/custom"
    with pytest.raises(KeyError):
        cfg.set("nope", 1)


def test_log_levels_and_file(tmp_path):
    out = io.StringIO()
    path = tmp_path / "logs" / "emoji.log"
    lg = Log(path=str(path), level="INFO", use_color=False, stream=out)
    lg.debug("hidden")
    lg.info("loaded 3 emoji")
    lg.error("reload failed")
    console = out.getvalue()
    assert "hidden" not in console
    assert "INFO    | loaded 3 emoji" in console
    assert "ERROR   | reload failed" in console
    assert path.read_text(encoding="utf-8").count("\n") == 2


def test_time_block_records_metric():
    out = io.StringIO()
    lg = Log(level="DEBUG", use_color=False, stream=out)
    with lg.time_block("qualification map") as t:
        pass
    assert t.elapsed >= 0
    assert "qualification map done:" in out.getvalue()


def test_configure_logging(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    cfg.data["log_level"] = "warning"
    cfg.data["log_color"] = False
    try:
        assert configure_logging(cfg) is log
        assert log.level == "WARNING"
        assert log.use_color is False
        assert not log.enabled_for("INFO")
    finally:
        log.configure(path=None, level="INFO", use_color=True)


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        Log().configure(level="LOUD")
