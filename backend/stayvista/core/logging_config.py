# stayvista/core/logging_config.py
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from stayvista.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logging(name: str = "stayvista", log_dir: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once and return the named logger.

    A rotating file handler is added when ``log_dir`` (or ``settings.LOG_DIR``)
    is set; otherwise records only go to stderr.
    """
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(getattr(h, "_stayvista", False) for h in root.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        stream._stayvista = True
        root.addHandler(stream)

        log_dir = log_dir or settings.LOG_DIR
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            handler = RotatingFileHandler(
                os.path.join(log_dir, f"{name}.log"), maxBytes=5 * 1024 * 1024, backupCount=5
            )
            handler.setFormatter(formatter)
            handler._stayvista = True
            root.addHandler(handler)

    return logging.getLogger(name)
