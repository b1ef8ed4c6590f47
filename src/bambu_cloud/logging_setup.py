import logging
import os
from typing import Optional

# Third-party loggers that are chatty at DEBUG (connection pool, retries)
NOISY_LOGGERS = ("urllib3", "requests")


def setup_logging(level: Optional[str] = None, quiet_http: bool = True) -> None:
    """
    Console logging for the CLIs.
    - Level comes from `level`, then LOG_LEVEL env, then DEBUG.
    - Unknown level names fall back to INFO.
    - HTTP libraries are held at WARNING unless quiet_http is False.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "DEBUG").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if quiet_http:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(level_value, logging.WARNING))
