import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level="WARNING"):
    """
    Configure root logging for the CLI.

    STATUSLIGHT_LOG_LEVEL wins over `level`; an unknown name falls back to
    WARNING. Leaves logging alone if a handler is already installed (pytest,
    an embedding application). Returns the level actually used, or None.
    """
    root = logging.getLogger()
    if root.handlers:
        return None

    level_name = os.environ.get("STATUSLIGHT_LOG_LEVEL", level).strip().upper()
    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        level_value = logging.WARNING

    logging.basicConfig(level=level_value, format=LOG_FORMAT)
    # urllib3 logs every connection at DEBUG; keep it quieter than our own logs
    logging.getLogger("urllib3").setLevel(max(level_value, logging.INFO))
    return level_value
