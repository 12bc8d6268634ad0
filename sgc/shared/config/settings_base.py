# -*- coding: utf-8 -*-
"""
sgc/shared/config/settings_base.py

Base de configuración (Pydantic v2) para el backend SGC.
- Esta clase NO instancia singletons; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Equipo SGC
Fecha: 2026-09-14
"""

import logging
from typing import Literal, Optional

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

DEFAULT_JWT_SECRET = "please-change-me"

logger = logging.getLogger(__name__)


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="SGC ISO 9001", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Base de datos (PostgreSQL)
    # =========================
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), validation_alias="DB_PASSWORD")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="sgc", validation_alias="DB_NAME")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")
    db_pool_recycle: int = Field(default=1800, validation_alias="DB_POOL_RECYCLE")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_ssl: bool = Field(default=False, validation_alias="DB_SSL")
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")
    db_create_tables: bool = Field(default=True, validation_alias="DB_CREATE_TABLES")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        URL de conexión para SQLAlchemy async.
        Prioriza DB_URL si existe, sino construye desde componentes individuales.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            url = self.db_url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        pw = quote_plus(self.db_password.get_secret_value())
        return (
            f"postgresql+asyncpg://{self.db_user}:{pw}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Auth / JWT
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr(DEFAULT_JWT_SECRET), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=1440, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    refresh_token_expire_minutes: int = Field(default=10080, validation_alias="REFRESH_TOKEN_EXPIRE_MINUTES")

    # Super admin inicial (bootstrap en el arranque)
    super_admin_email: Optional[str] = Field(default=None, validation_alias="SUPER_ADMIN_EMAIL")
    super_admin_password: Optional[SecretStr] = Field(default=None, validation_alias="SUPER_ADMIN_PASSWORD")
    super_admin_name: str = Field(default="Super Administrador", validation_alias="SUPER_ADMIN_NAME")
    platform_organization_name: str = Field(default="Plataforma SGC", validation_alias="PLATFORM_ORGANIZATION_NAME")

    # =========================
    # Scheduler
    # =========================
    scheduler_enabled: bool = Field(default=True, validation_alias="SCHEDULER_ENABLED")
    registros_alertas_interval_minutes: int = Field(default=60, validation_alias="REGISTROS_ALERTAS_INTERVAL_MINUTES")

    # Paginación
    page_size_default: int = Field(50, validation_alias="DEFAULT_PAGE_SIZE")
    page_size_max: int = Field(200, validation_alias="MAX_PAGE_SIZE")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad.
        Se invoca desde config_loader tras instanciar el settings.
        """
        if self.is_prod:
            jwt_key = self.jwt_secret_key.get_secret_value()
            if not jwt_key or jwt_key == DEFAULT_JWT_SECRET or len(jwt_key) < 32:
                raise ValueError("JWT_SECRET_KEY debe tener ≥32 caracteres en producción")
            if self.get_cors_origins() == ["*"]:
                raise ValueError("CORS_ORIGINS no puede ser '*' en producción")
        elif self.jwt_secret_key.get_secret_value() == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET_KEY usa el valor por defecto (solo aceptable fuera de producción)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo sgc/shared/config/settings_base.py
