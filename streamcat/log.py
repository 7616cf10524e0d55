import datetime
import logging
import os

from pathvalidate import sanitize_filename
from rich.logging import RichHandler

from streamcat import config

root_logger = logging.root
root_logger.setLevel(config.LOG_LEVEL)

os.makedirs(config.LOG_LOCATION, exist_ok=True)
fname = sanitize_filename(datetime.datetime.now().strftime("log_%x_%X%p.log"))
file_handler = logging.FileHandler(os.path.join(config.LOG_LOCATION, fname), encoding="UTF-8")
file_handler.setLevel(config.LOG_LEVEL)
log_formatter = logging.Formatter("[%(asctime)s] [%(name)s] [%(levelname)-5.5s] --- %(message)s")
file_handler.setFormatter(log_formatter)
root_logger.addHandler(file_handler)

console_handler = RichHandler()
console_handler.setLevel(config.LOG_LEVEL)
root_logger.addHandler(console_handler)

logger = logging.getLogger("streamcat")
