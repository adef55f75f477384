# Rev 0.1.0

from __future__ import annotations
import json
import logging

from stafftrack.utils import config, logging_setup, paths


def test_defaults_when_missing(tmp_path):
    s = config.load_settings(tmp_path / "nope.json")
    assert s == config.defaults()
    assert s["main_window"] == {"width": 600, "height": 400}


def test_stored_values_merge_over_defaults(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"main_window": {"width": 900}, "extra": 1}))
    s = config.load_settings(p)
    assert s["main_window"] == {"width": 900, "height": 400}
    assert s["ui"]["diagnostics_dock_visible"] is False
    assert s["extra"] == 1


def test_corrupt_file_falls_back(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text("{not json")
    assert config.load_settings(p) == config.defaults()
    p.write_text("[1, 2]")
    assert config.load_settings(p) == config.defaults()


def test_save_then_load(tmp_path):
    p = tmp_path / "nested" / "settings.json"
    data = config.defaults()
    data["ui"]["diagnostics_dock_visible"] = True
    config.save_settings(data, p)
    assert config.load_settings(p)["ui"]["diagnostics_dock_visible"] is True


def test_defaults_are_not_shared():
    config.defaults()["main_window"]["width"] = 1
    assert config.defaults()["main_window"]["width"] == 600


def test_xdg_paths(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    assert paths.logs_dir() == tmp_path / "state" / "stafftrack" / "logs"
    assert config.settings_file() == tmp_path / "cfg" / "stafftrack" / "settings.json"
    paths.ensure_dirs()
    assert paths.logs_dir().is_dir()
    assert paths.config_dir().is_dir()


def test_setup_logging_writes_file(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
    monkeypatch.setenv("STAFFTRACK_LOG_LEVEL", "DEBUG")
    monkeypatch.setattr("sys.excepthook", __import__("sys").excepthook)
    app_logger = logging.getLogger("stafftrack")
    saved = list(app_logger.handlers), app_logger.level
    try:
        logfile = logging_setup.setup_logging()
        assert logfile == tmp_path / "stafftrack" / "logs" / "stafftrack.log"
        assert logging_setup.log_file_path() == logfile

        logging_setup.get_logger("test").debug("hello from test")
        for h in app_logger.handlers:
            h.flush()
        text = logging_setup.tail_log(logfile)
        assert "| DEBUG | stafftrack.test | hello from test" in text
    finally:
        for h in list(app_logger.handlers):
            app_logger.removeHandler(h)
            h.close()
        for h in saved[0]:
            app_logger.addHandler(h)
        app_logger.setLevel(saved[1])


def test_tail_log_placeholders(tmp_path):
    assert logging_setup.tail_log(None) == "(logging not initialized)"
    assert logging_setup.tail_log(tmp_path / "missing.log") == "(log file not found)"
    p = tmp_path / "x.log"
    p.write_text("".join(f"{i}\n" for i in range(10)))
    assert logging_setup.tail_log(p, max_lines=3) == "7\n8\n9\n"


def test_log_signature_tracks_changes(tmp_path):
    assert logging_setup.log_signature(None) is None
    p = tmp_path / "x.log"
    assert logging_setup.log_signature(p) is None
    p.write_text("a\n")
    first = logging_setup.log_signature(p)
    assert first[0] == 2
    with p.open("a") as f:
        f.write("bb\n")
    assert logging_setup.log_signature(p)[0] == 5
