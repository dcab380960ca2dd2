import logging
from typing import Optional

import streamlit as st

from utils import config

logger = logging.getLogger(__name__)


class SnackbarHost:
    """Shows transient messages that dismiss themselves.

    ``st.toast`` returns immediately and the frontend owns the dismiss timer,
    so showing a message never blocks the caller.
    """

    def __init__(self, icon: Optional[str] = None):
        self.icon = icon or config.TOAST_ICON

    def show(self, message: str):
        logger.debug("toast: %s", message)
        st.toast(message, icon=self.icon)
