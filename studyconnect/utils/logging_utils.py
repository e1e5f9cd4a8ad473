"""
Logging Setup

configure_logging(level) attaches one stream handler to the `studyconnect`
logger. Modules log through logging.getLogger(__name__).
"""

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(level='INFO'):
    """Configure the package logger; repeated calls only adjust the level"""
    logger = logging.getLogger('studyconnect')
    logger.setLevel(level)
    if not any(getattr(h, '_studyconnect', False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._studyconnect = True
        logger.addHandler(handler)
    return logger
