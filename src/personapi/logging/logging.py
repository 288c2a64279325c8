# personapi/logging/logging.py
import logging
import os
import sys
from pathlib import Path

from .config import load_log_level

FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

# names of loggers that already carry our handlers
_configured: set[str] = set()


def _resolve_log_file(log_file=None, log_dir=None) -> Path:
    """Return ``log_file`` or ``personapi.log`` in ``log_dir`` / ``PERSONAPI_LOG_DIR``."""
    if log_file is not None:
        return Path(log_file)
    if log_dir is None:
        log_dir = os.environ.get("PERSONAPI_LOG_DIR", Path.home() / ".personapi" / "logs")
    return Path(log_dir) / "personapi.log"


def get_logger(name="personapi", level=None, log_file=None, log_dir=None, console=True, propagate=False):
    """Return logger ``name``, attaching file (and stderr) handlers on first use.

    ``level`` defaults to the level saved by ``personapi logging set-level``,
    else INFO. Later calls with the same name return the logger unchanged;
    use :func:`reset_logger` to reconfigure it.
    """
    logger = logging.getLogger(name)
    if name in _configured:
        return logger

    path = _resolve_log_file(log_file, log_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    handlers = [logging.FileHandler(path, encoding="utf-8")]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level if level is not None else load_log_level() or logging.INFO)
    logger.propagate = propagate
    _configured.add(name)
    return logger


def reset_logger(name=None):
    """Close and detach the handlers of ``name`` (or of every configured logger)."""
    for n in [name] if name is not None else list(_configured):
        logger = logging.getLogger(n)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        _configured.discard(n)


def get_configured_level(name="personapi"):
    return logging.getLevelName(logging.getLogger(name).getEffectiveLevel())
