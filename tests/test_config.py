from bookmore.core.config import Settings


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("JWT_SECRET_KEY", "another-secret")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "7")
    monkeypatch.setenv("UNRELATED_SETTING", "ignored")

    settings = Settings(_env_file=None)

    assert settings.JWT_SECRET_KEY == "another-secret"
    assert settings.DEFAULT_PAGE_SIZE == 7
    assert not hasattr(settings, "UNRELATED_SETTING")


def test_settings_names_are_case_sensitive(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("JWT_SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert Settings(_env_file=None).LOG_LEVEL == "INFO"


def test_cors_origins_list():
    settings = Settings(_env_file=None, DATABASE_URL="sqlite://", JWT_SECRET_KEY="k", CORS_ORIGINS="http://a, http://b,")

    assert settings.cors_origins_list == ["http://a", "http://b"]
