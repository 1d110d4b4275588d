from task_viewer.config import Config, load_config


def test_load_config_defaults(monkeypatch):
    for name in ("DEFAULT_FORMAT", "MAX_INPUT_BYTES", "LOG_LEVEL", "SHOW_DETAILS"):
        monkeypatch.delenv(f"TASK_VIEWER_{name}", raising=False)
    assert load_config() == Config()


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("TASK_VIEWER_DEFAULT_FORMAT", "tabular")
    monkeypatch.setenv("TASK_VIEWER_MAX_INPUT_BYTES", "2048")
    monkeypatch.setenv("TASK_VIEWER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_VIEWER_SHOW_DETAILS", "yes")
    config = load_config()
    assert config.default_format == "tabular"
    assert config.max_input_bytes == 2048
    assert config.log_level == "DEBUG"
    assert config.show_details is True


def test_load_config_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("TASK_VIEWER_MAX_INPUT_BYTES", "lots")
    monkeypatch.setenv("TASK_VIEWER_LOG_LEVEL", "chatty")
    monkeypatch.setenv("TASK_VIEWER_SHOW_DETAILS", "maybe")
    config = load_config()
    assert config.max_input_bytes == Config.max_input_bytes
    assert config.log_level == "INFO"
    assert config.show_details is False
