"""
Logging setup for the favicon service.

The service logs to stdout and to a dated file under logs/. Each stage of the
favicon pipeline has its own logger so the noisy per-icon render lines can be
turned up without touching the rest:

    FAVICON_LOG_LEVEL          root level (default INFO)
    FAVICON_RENDER_LOG_LEVEL   faviconkit.image_io, faviconkit.icon_set
    FAVICON_ROUTES_LOG_LEVEL   faviconkit.publisher, faviconkit.manifest
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# env var -> loggers it controls
COMPONENT_LOGGERS: Dict[str, Tuple[str, ...]] = {
    "FAVICON_RENDER_LOG_LEVEL": ("faviconkit.image_io", "faviconkit.icon_set"),
    "FAVICON_ROUTES_LOG_LEVEL": ("faviconkit.publisher", "faviconkit.manifest"),
}


def log_dir() -> Path:
    """Directory for log files; FAVICON_LOG_DIR wins over the repo's logs/."""
    configured = os.getenv("FAVICON_LOG_DIR")
    if configured:
        return Path(configured).expanduser()
    return Path(__file__).resolve().parent.parent / "logs"


def get_log_level(env_var: str, default: int = logging.INFO) -> int:
    """Numeric level named by ``env_var``; unset or unknown names give ``default``."""
    value = os.getenv(env_var, "").upper().strip()
    if not value:
        return default
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else default


def _file_handler(log_file: str, formatter: logging.Formatter) -> Optional[logging.FileHandler]:
    directory = log_dir()
    date_str = datetime.now().strftime("%Y%m%d")
    try:
        directory.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(directory / f"{date_str}_{log_file}", encoding="utf-8")
    except OSError:
        # Read-only checkout: keep console output only
        return None
    handler.setFormatter(formatter)
    return handler


def configure_component_levels(default: Optional[int] = None) -> Dict[str, int]:
    """
    Apply the per-stage levels from COMPONENT_LOGGERS.

    Stages without their env var follow ``default`` (or the root level when
    ``default`` is None).

    Returns:
        logger name -> level that was applied
    """
    if default is None:
        default = logging.getLogger().level
    applied = {}
    for env_var, names in COMPONENT_LOGGERS.items():
        level = get_log_level(env_var, default)
        for name in names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level
    return applied


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
):
    """
    Configure the root logger and the pipeline stage loggers.

    Args:
        level: Root log level
        log_file: File name under log_dir(), prefixed with the current date
        console: Also log to stdout
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
        handlers[-1].setFormatter(formatter)
    if log_file:
        file_handler = _file_handler(log_file, formatter)
        if file_handler is not None:
            handlers.append(file_handler)
    for handler in handlers:
        root_logger.addHandler(handler)

    configure_component_levels(level)
    # Pillow logs every plugin it probes while identifying a source image
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return root_logger


_initialized = False


def init_default_logging():
    """Initialize the service logging once per process."""
    global _initialized
    if not _initialized:
        setup_logging(
            level=get_log_level("FAVICON_LOG_LEVEL"),
            log_file="favicon.log",
            console=True,
        )
        _initialized = True


__all__ = [
    "COMPONENT_LOGGERS",
    "configure_component_levels",
    "get_log_level",
    "init_default_logging",
    "log_dir",
    "setup_logging",
]
