import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

# Handlers installed by configure_logging, replaced on reconfiguration
_HANDLERS: list[logging.Handler] = []


def configure_logging(verbosity: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Configure unified linky logging.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug
        log_file: Optional path of a rotating log file

    Returns:
        The ``linky`` root logger
    """
    root_logger = logging.getLogger("linky")
    for handler in _HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _HANDLERS.clear()

    level = LEVELS[min(max(verbosity, 0), len(LEVELS) - 1)]
    root_logger.setLevel(level)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    _HANDLERS.append(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        _HANDLERS.append(file_handler)

    for handler in _HANDLERS:
        root_logger.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return root_logger
