import logging
import sys

from task_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = None) -> None:
    """Configure le logger racine une seule fois (stdout, format texte)."""
    level = (level or settings.LOG_LEVEL).upper()

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()  # évite les doublons en cas de reload

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # on logge nous-mêmes les requêtes dans le middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
