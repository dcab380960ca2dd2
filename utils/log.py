import logging

from utils import config

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = None):
    """Configure root logging once per process.

    Streamlit reruns the entry script on every interaction, so repeated calls
    must not stack handlers; ``basicConfig`` is a no-op once the root logger
    has one.
    """
    level_name = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=_FORMAT)
