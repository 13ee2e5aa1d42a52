# brecho/config/settings.py
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Identificação da Aplicação ---
    APP_NAME: str = "Brechó DP - Motor de Cálculo"
    APP_VERSION: str = "1.0.0"

    # Mesmo prefixo usado pelo front-end (React) para as rotas da API
    API_PREFIX: str = "/api"

    # --- Servidor (uvicorn) ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # --- Logs ---
    LOG_LEVEL: str = "INFO"
    # Vazio desliga o log em arquivo
    LOG_FILE: Optional[str] = "logs/brecho_dp_{time}.log"

    # --- CORS (dashboard) ---
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


# Instância global
settings = get_settings()
