"""Settings: defaults, env overrides and MongoDB connection string resolution."""

from smart_transport.config import LOCAL_MONGODB_URI, Settings


def test_port_defaults_to_5000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).port == 5000


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_credentials_are_url_encoded_into_srv_uri():
    settings = Settings(
        _env_file=None, db_user="ops@diu", db_pass="p:ss/w@rd", mongodb_uri=None,
    )
    uri = settings.mongo_connection_uri
    assert uri.startswith("mongodb+srv://ops%40diu:p%3Ass%2Fw%40rd@")
    assert "cluster0.mhbkfqu.mongodb.net" in uri
    assert "retryWrites=true" in uri


def test_explicit_uri_wins_over_credentials():
    settings = Settings(
        _env_file=None, db_user="u", db_pass="p",
        mongodb_uri="mongodb://mongo:27017",
    )
    assert settings.mongo_connection_uri == "mongodb://mongo:27017"


def test_without_credentials_falls_back_to_localhost():
    settings = Settings(
        _env_file=None, db_user=None, db_pass=None, mongodb_uri=None,
    )
    assert settings.mongo_connection_uri == LOCAL_MONGODB_URI


def test_cors_allows_all_origins_by_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).cors_origins == ["*"]
