"""
Configuration Settings.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class SocialSettings(BaseSettings):
    """Settings for the social graph engine.

    Every field can be overridden with a SOCIAL_-prefixed environment
    variable, e.g. SOCIAL_FIRST_POST_SERIAL=1.
    """

    # Posts
    first_post_serial: int = 0

    # Logging
    console_log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file_enabled: bool = True
    log_dir: Optional[str] = None  # defaults to socialapp/logs

    class Config:
        env_prefix = "SOCIAL_"
        env_file = ".env"
        case_sensitive = False


settings = SocialSettings()
