# brecho/config/logging_config.py

import sys
from loguru import logger

from brecho.config.settings import settings

# Remove o handler padrão para evitar duplicação de logs no console.
logger.remove()

# Console: formato limpo e colorido, nível vindo da configuração (LOG_LEVEL).
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True,
)

# Arquivo: tudo desde DEBUG, novo arquivo a cada 10 MB, mantido por 30 dias.
if settings.LOG_FILE:
    logger.add(
        settings.LOG_FILE,
        rotation="10 MB",
        retention="30 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )

# Exporta o logger configurado para ser usado em outros módulos.
log = logger
