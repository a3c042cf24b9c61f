from restaurant_lookup.core import config


def setup_function(function):
    config.get_settings.cache_clear()


def teardown_function(function):
    config.get_settings.cache_clear()


def test_get_settings_reads_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "abc123")
    monkeypatch.setenv("PLACES_REQUEST_TIMEOUT", "4.5")
    monkeypatch.setenv("PORT", "9100")

    settings = config.get_settings()

    assert settings.google_places_api_key == "abc123"
    assert settings.request_timeout == 4.5
    assert settings.port == 9100


def test_get_settings_warns_when_missing(monkeypatch, caplog):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    monkeypatch.delenv("GOOGLE_PLACES_API_KEY", raising=False)
    monkeypatch.delenv("PLACES_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    with caplog.at_level("WARNING"):
        settings = config.get_settings()

    assert "GOOGLE_PLACES_API_KEY is not configured" in " ".join(caplog.messages)
    assert settings.google_places_api_key == ""
    assert settings.request_timeout == 10.0
    assert settings.port == 8080


def test_timeout_can_be_disabled(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    monkeypatch.setenv("PLACES_REQUEST_TIMEOUT", "none")

    assert config.get_settings().request_timeout is None
