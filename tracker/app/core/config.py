"""
Configuration settings for the Parcel Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    # Application
    log_level: str = "INFO"
    
    # Database Configuration
    database_url: str = "sqlite:///tracker.db"
    db_echo: bool = False
    db_pool_size: int = 20
    db_max_overflow: int = 10
    db_connect_timeout: int = 10
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
