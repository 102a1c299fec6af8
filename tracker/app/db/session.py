"""
Database engine configuration.

This module handles engine creation and schema bootstrap using SQLAlchemy.
The parcel store receives an engine from here (or from the caller) and never
creates one itself.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings

logger = logging.getLogger("tracker.db")


def create_db_engine(url: Optional[str] = None, echo: Optional[bool] = None, **kwargs) -> Engine:
    """
    Build a synchronous engine from settings.
    
    SQLite connections are opened with check_same_thread=False so that one
    engine can be shared across threads; pool sizing only applies to server
    databases.
    """
    url = url or settings.database_url
    options = {
        "echo": settings.db_echo if echo is None else echo,
        "future": True,
    }
    
    if make_url(url).get_backend_name() == "sqlite":
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": settings.db_connect_timeout,
        }
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
        options["pool_pre_ping"] = True
    
    options.update(kwargs)
    return create_engine(url, **options)


# Create engine (lazy: nothing connects until first use)
engine = create_db_engine()

# Create declarative base for models
Base = declarative_base()


def init_db(bind: Engine = None) -> None:
    """Create the parcel table if it does not exist."""
    # Import models to ensure they are registered with Base
    from tracker.app.models.parcel import ParcelRecord  # noqa: F401
    
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Schema ready", extra={"url": bind.url.render_as_string(hide_password=True)})


def drop_db(bind: Engine = None) -> None:
    from tracker.app.models.parcel import ParcelRecord  # noqa: F401
    
    Base.metadata.drop_all(bind=bind or engine)
