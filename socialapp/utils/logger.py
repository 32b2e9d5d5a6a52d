import logging
import os

from ..config.settings import settings as default_settings

def setup_logger(name='socialapp', config=None):
    """Set up a logger with console and file output.

    Creates a logger that writes:
    - console_log_level and above to console
    - DEBUG and above to file (<log_dir>/social.log) when file logging is enabled

    Args:
        name (str, optional): Logger name. Defaults to 'socialapp'
        config (SocialSettings, optional): Settings to read. Defaults to the
            module-level settings instance

    Returns:
        logging.Logger: Configured logger instance

    Side Effects:
        - Creates log directory if it doesn't exist
        - Creates/appends to social.log file
    """
    config = config or default_settings
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    # Create formatters and handlers
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, config.console_log_level.upper(), logging.INFO))
    logger.addHandler(console_handler)

    # File handler - ensure log directory exists
    if config.log_file_enabled:
        log_dir = config.log_dir or os.path.join(os.path.dirname(os.path.dirname(__file__)), 'logs')
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, 'social.log'), encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
