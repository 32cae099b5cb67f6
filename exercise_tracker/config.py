# exercise_tracker/config.py

import os
import logging
from dotenv import load_dotenv


load_dotenv()


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/tracker.db")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEFAULT_LOG_LIMIT = int(os.getenv("DEFAULT_LOG_LIMIT", "500"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    """
    Configures the root logger with a single console handler.
    Calling it again only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(getattr(h, "_tracker_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tracker_handler = True
        root.addHandler(handler)
