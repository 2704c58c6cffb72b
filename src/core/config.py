"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/ViaCEP) y el pipeline lean config de forma
  consistente.
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "valida-br"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "valida-br"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "valida-br"
    return Path.home() / ".config" / "valida-br"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="VALIDA_BR_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request al resolvedor de CEP (segundos).",
    )
    user_agent: str = Field(
        default="valida-br/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones HTTP.",
    )
    viacep_base_url: str = Field(
        default="https://viacep.com.br",
        min_length=8,
        description="Base URL del servicio ViaCEP (sin /ws).",
    )
    batch_max_concurrency: int = Field(
        default=8,
        ge=1,
        le=100,
        description="Consultas de CEP simultáneas máximas en modo batch.",
    )
    language: Language = Field(
        default=Language.PORTUGUESE,
        description="Idioma de los mensajes de fallo (pt/en).",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """`AppSettings` compartido para llamadores que no inyectan configuración.

    Se lee una sola vez por proceso; `get_settings.cache_clear()` fuerza relectura.
    """

    return AppSettings()
