import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", gbu_home: Path | None = None) -> None:
    """Configure unified GBU logging.

    Args:
        level: Level name for the ``gbu`` logger.
        gbu_home: Directory holding ``gbu.log``. If None, derived from GBU_HOME.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if gbu_home is None:
        from gbu.api.config.GbuConfig import GbuConfig

        gbu_home = GbuConfig.get_home_dir()

    gbu_home.mkdir(parents=True, exist_ok=True)
    log_file = gbu_home / "gbu.log"

    root_logger = logging.getLogger("gbu")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
