# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from dotenv import load_dotenv

"""
Central de configurações (Settings) do BlogAPI.


- Carrega variáveis do .env (app/env/db/log/cors).
- Fornece defaults seguros e tipados via dataclass.
- Expõe `settings` como singleton para uso em toda a app.
"""

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "BlogAPI")
    APP_ENV: str = os.getenv("APP_ENV", "local")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))


    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))
    DB_ECHO: bool = _flag("DB_ECHO")

    # bootstrap do schema (dev/testes) e distribuição Citus; migrations ficam fora
    DB_CREATE_SCHEMA: bool = _flag("DB_CREATE_SCHEMA")
    DB_DISTRIBUTE_BLOGS: bool = _flag("DB_DISTRIBUTE_BLOGS")

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

settings = Settings()
