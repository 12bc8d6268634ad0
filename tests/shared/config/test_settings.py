# -*- coding: utf-8 -*-
"""
Tests de configuración (pydantic-settings) y logging.
"""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from sgc.shared.config import get_settings, setup_logging
from sgc.shared.config.config_loader import settings_class_for
from sgc.shared.config.settings_dev import DevSettings
from sgc.shared.config.settings_prod import ProdSettings
from sgc.shared.config.settings_testing import EnvTestingSettings

_CLAVE_LARGA = "k" * 40


def test_get_settings_en_entorno_test():
    settings = get_settings()
    assert isinstance(settings, EnvTestingSettings)
    assert settings.is_test
    assert settings.scheduler_enabled is False
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert get_settings() is settings


@pytest.mark.parametrize(
    "env, esperado",
    [
        ("production", ProdSettings),
        (" Production ", ProdSettings),
        ("test", EnvTestingSettings),
        ("development", DevSettings),
        (None, DevSettings),
    ],
)
def test_clase_de_settings_por_entorno(env, esperado):
    assert settings_class_for(env) is esperado


def test_entorno_desconocido_usa_desarrollo(caplog):
    with caplog.at_level(logging.WARNING):
        assert settings_class_for("staging") is DevSettings
    assert "staging" in caplog.text


@pytest.mark.parametrize(
    "url, esperado",
    [
        ("postgres://u:p@h:5432/db", "postgresql+asyncpg://u:p@h:5432/db"),
        ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("sqlite+aiosqlite:///./sgc.db", "sqlite+aiosqlite:///./sgc.db"),
    ],
)
def test_database_url_normaliza_driver(url, esperado):
    assert DevSettings(DB_URL=url).database_url == esperado


def test_database_url_desde_componentes(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.delenv("DB_URL", raising=False)
    settings = ProdSettings(
        DB_USER="sgc",
        DB_PASSWORD="p@ss",
        DB_HOST="db",
        DB_PORT=6543,
        DB_NAME="calidad",
        JWT_SECRET_KEY=_CLAVE_LARGA,
        CORS_ORIGINS="https://app.example.com",
    )
    assert settings.database_url == "postgresql+asyncpg://sgc:p%40ss@db:6543/calidad"


def test_cors_origins_separados_por_coma():
    settings = DevSettings(CORS_ORIGINS="https://a.example.com, 'https://b.example.com',")
    assert settings.get_cors_origins() == ["https://a.example.com", "https://b.example.com"]
    assert DevSettings(CORS_ORIGINS="*").get_cors_origins() == ["*"]


@pytest.fixture
def entorno_produccion(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")


def test_produccion_exige_clave_jwt_larga(entorno_produccion):
    settings = ProdSettings(JWT_SECRET_KEY="corta", CORS_ORIGINS="https://app.example.com")
    with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
        settings._security_checks()


def test_produccion_rechaza_cors_comodin(entorno_produccion):
    settings = ProdSettings(JWT_SECRET_KEY=_CLAVE_LARGA, CORS_ORIGINS="*")
    with pytest.raises(ValueError, match="CORS_ORIGINS"):
        settings._security_checks()


def test_produccion_valida(entorno_produccion):
    settings = ProdSettings(JWT_SECRET_KEY=_CLAVE_LARGA, CORS_ORIGINS="https://app.example.com")
    settings._security_checks()
    assert settings.is_prod
    assert settings.log_format == "json"
    assert settings.db_create_tables is False


def test_setup_logging_json():
    try:
        setup_logging("INFO", "json")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
        assert logging.getLogger("apscheduler").level == logging.WARNING
    finally:
        setup_logging("WARNING", "plain")


def test_setup_logging_plain():
    setup_logging("WARNING", "plain")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
