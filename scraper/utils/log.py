import logging
from pathlib import Path
from typing import Callable, Optional

from config import ACTIVE_CONFIG

Logger = Callable[[str], None]

_ROOT_NAME = "estateai"
_configured = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Liefert einen Logger unterhalb von 'estateai'.
    Handler werden beim ersten Aufruf aus config.LOGGING gebaut.
    """
    global _configured
    root = logging.getLogger(_ROOT_NAME)

    if not _configured:
        settings = ACTIVE_CONFIG.LOGGING
        root.setLevel(settings["LEVEL"])
        formatter = logging.Formatter(settings["FORMAT"])

        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        root.addHandler(stream)

        if settings.get("LOG_FILE"):
            Path(settings["LOG_FILE"]).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(settings["LOG_FILE"], encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        _configured = True

    return root.getChild(name) if name else root


def _log(logger: Optional[Logger], msg: str) -> None:
    """Helper: wenn kein logger übergeben wird -> estateai-Logger."""
    if logger is not None:
        logger(msg)
    else:
        get_logger().info(msg)
