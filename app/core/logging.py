import logging
from pathlib import Path
from typing import Optional

import structlog

ACCESS_LOGGER_NAME = "access"

_shared_processors = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _access_handler(access_log_path: str) -> Optional[logging.Handler]:
    """File handler for the access log, or None when the file can't be opened."""
    path = Path(access_log_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).error("Cannot open access log %s: %s", path, e)
        return None

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            foreign_pre_chain=_shared_processors,
        )
    )
    return handler


def configure_logging(level: str = "INFO", access_log_path: Optional[str] = None) -> None:
    """
    Console logging for the application plus a separate `access` logger.
    The access logger never propagates to the console; it only writes
    to `access_log_path` (one JSON line per request).
    """
    console = logging.StreamHandler()
    console.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False),
            ],
            foreign_pre_chain=_shared_processors,
        )
    )

    root = logging.getLogger()
    root.handlers = [console]
    root.setLevel(level.upper())

    access = logging.getLogger(ACCESS_LOGGER_NAME)
    access.handlers.clear()
    access.propagate = False
    access.setLevel(logging.INFO)
    if access_log_path:
        handler = _access_handler(access_log_path)
        if handler is not None:
            access.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
