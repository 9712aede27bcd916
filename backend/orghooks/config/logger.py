# orghooks/config/logger.py
import logging
import pathlib
from logging.handlers import RotatingFileHandler
from orghooks.config.config import settings

LOG_FORMAT = "%(asctime)s — %(name)s — %(levelname)s — %(message)s"
LOG_LEVEL = logging.DEBUG if settings.debug else logging.INFO

formatter = logging.Formatter(LOG_FORMAT)

# Handler pour console/terminal
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)

logger = logging.getLogger(settings.app_name)
logger.setLevel(LOG_LEVEL)
logger.addHandler(console_handler)

# Handler pour fichier, seulement si configuré
if settings.LOG_FILE:
    pathlib.Path(settings.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(settings.LOG_FILE, maxBytes=10*1024*1024, backupCount=5)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
