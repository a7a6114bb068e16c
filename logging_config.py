"""Configuración centralizada de logs."""

import sys

from loguru import logger


LOG_FORMAT = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{file}::{function}:{line}</>",
        "{message}",
    )
)


def configure_logging(level: str = "WARNING") -> int:
    """Sustituye el sink por defecto de loguru por uno en stderr.

    Devuelve el id del sink añadido.
    """
    logger.remove()
    return logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
