"""
Root logger setup for the service.

By default the service logs to the console only; setting ``LOG_FILE``
adds a file next to it.  Store operations log under
``user_crud_api.app.services.user_service`` and the HTTP client under
``user_crud_api.client``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service's handlers to the root logger.

    Does nothing when the root logger already has handlers, e.g. when
    uvicorn or pytest configured logging first, or ``create_app`` is
    called once per test.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` value such as ``"debug"`` or ``"INFO"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` value; ``None`` or empty keeps logging on the
        console only.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
