from __future__ import annotations
import logging
import sys

from .config import setting

def get_logger(name: str = "pdv", level: int | str | None = None) -> logging.Logger:
    """Logger com um único handler em stdout; nível padrão vem de PDV_LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.propagate = False
    if level is None:
        level = setting("PDV_LOG_LEVEL").upper()
    logger.setLevel(level)
    return logger
