"""Environment configuration."""

import pytest

from core import config


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        config.database_url()


def test_port_defaults_and_parses(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert config.port() == 3000

    monkeypatch.setenv("PORT", "8080")
    assert config.port() == 8080

    monkeypatch.setenv("PORT", "not-a-port")
    assert config.port() == 3000


def test_tls_is_on_without_verification_by_default(monkeypatch):
    monkeypatch.delenv("DATABASE_SSL", raising=False)
    monkeypatch.delenv("DATABASE_SSL_VERIFY", raising=False)
    assert config.database_ssl() is True
    assert config.database_ssl_verify() is False

    monkeypatch.setenv("DATABASE_SSL", "false")
    monkeypatch.setenv("DATABASE_SSL_VERIFY", "yes")
    assert config.database_ssl() is False
    assert config.database_ssl_verify() is True


def test_pool_max_never_below_min(monkeypatch):
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "5")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "2")
    assert config.pool_max_size() == 5


def test_cors_origins_split_on_commas(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert config.cors_origins() == ["*"]

    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://clan.example ,")
    assert config.cors_origins() == ["http://localhost:5173", "https://clan.example"]
