import importlib


def test_load_app_settings_uses_current_config(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///custom.db")

    import config as _config
    importlib.reload(_config)
    import trackhub.settings as settings
    importlib.reload(settings)

    s = settings.load_app_settings()

    assert s.port == 8080
    assert s.host == "127.0.0.1"
    assert s.debug is True
    assert s.database_url == "sqlite:///custom.db"


def test_config_defaults_when_env_missing_or_invalid(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.delenv("DEBUG", raising=False)

    import config as _config
    importlib.reload(_config)

    assert _config.Config.PORT == 3000
    assert _config.Config.DEBUG is False
    assert _config.Config.SQLALCHEMY_DATABASE_URI.endswith("trackhub.db")


def test_load_app_settings_overrides_are_coerced():
    from trackhub.settings import load_app_settings

    s = load_app_settings({"port": "99999", "enable_console_logs": "on"})
    assert s.port == 3000
    assert s.enable_console_logs is True


def test_launcher_settings_drive_database_and_console_logging(monkeypatch, database_uri):
    monkeypatch.setenv("ENABLE_CONSOLE_LOGS", "1")
    monkeypatch.setenv("DATABASE_URL", database_uri)

    import config as _config
    importlib.reload(_config)
    import trackhub.settings as settings
    importlib.reload(settings)

    s = settings.load_app_settings()
    assert s.enable_console_logs is True
    assert s.database_url == database_uri

    import app as app_module

    application = app_module.create_app({"SQLALCHEMY_DATABASE_URI": s.database_url})
    try:
        assert application.config["SQLALCHEMY_DATABASE_URI"] == database_uri
    finally:
        app_module.dispose_database(application)
