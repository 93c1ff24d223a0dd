"""
Shared SDK logger for the model layer, protocols, clients and services.

Every module asks for its logger through get_logger so all SDK output
shares one stdout format and one level switch (LOG_LEVEL). Loggers without
a name fall under "aws_service_models".
"""
import logging
import os
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name, usually the calling module's __name__

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or 'aws_service_models')

    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # Keep records off the root logger
    logger.propagate = False

    return logger
