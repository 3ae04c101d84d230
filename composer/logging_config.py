"""
Logging setup for the composer scripts
"""

import logging
import os
import sys


def setup_logging(name: str = 'composer', log_dir: str = None) -> logging.Logger:
    """Console at INFO (DEBUG when DEBUG=true), file at DEBUG"""
    log_dir = log_dir or os.getenv('LOG_DIR', 'logs')
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    file_handler = logging.FileHandler(os.path.join(log_dir, f'{name}.log'), encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    if os.getenv('DEBUG', 'false').lower() == 'true':
        console_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger
