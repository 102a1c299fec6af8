"""
Logging helpers for the parcel tracker.

Adds timing and structured logging context to store operations.
"""

import time
import logging
from contextlib import contextmanager
from typing import Iterator

# Configure structured logger
logger = logging.getLogger("tracker")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a stream handler to the root logger once.
    
    Repeated calls only adjust the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("tracker").setLevel(level.upper())


@contextmanager
def observe(operation: str, **context) -> Iterator[dict]:
    """
    Time a store operation and log the outcome.
    
    Yields the structured log dict so callers can add fields
    (e.g. the assigned number) before it is emitted.
    """
    start_time = time.perf_counter()
    log_data = {"operation": operation, **context}
    
    try:
        yield log_data
    except Exception as exc:
        log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
        log_data["error_type"] = type(exc).__name__
        logger.warning("Operation Failed", extra=log_data)
        raise
    
    log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
    logger.debug("Operation Completed", extra=log_data)
