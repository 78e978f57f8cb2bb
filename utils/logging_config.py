import logging
import os


def setup_logging(log_file=None, log_level=None):
    """
    Setup logging configuration for all modules

    Args:
        log_file: Log file path (optional, falls back to config.LOG_FILE)
        log_level: Log level name (optional, falls back to config.LOG_LEVEL)
    """
    try:
        import config
        if log_level is None:
            log_level = getattr(config, 'LOG_LEVEL', 'INFO')
        if log_file is None:
            log_file = getattr(config, 'LOG_FILE', None)
    except ImportError:
        if log_level is None:
            log_level = 'INFO'

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Silence noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return root_logger
