"""Page switching through ``st.session_state``.

Navigation is requested from widget callbacks, which run before the next
script pass, so setting the target page is enough: the router picks it up on
the rerun that follows.
"""
import logging

import streamlit as st

from domain.constants import NAV_KEY, DEFAULT_PAGE, VISIBILITY_KEY_PREFIX

logger = logging.getLogger(__name__)


def current_page() -> str:
    return st.session_state.get(NAV_KEY, DEFAULT_PAGE)


def navigate(page: str):
    logger.debug("navigate: %s -> %s", current_page(), page)
    if page != current_page():
        # fields on the next screen are new instances and start masked
        for key in [k for k in st.session_state if str(k).startswith(VISIBILITY_KEY_PREFIX)]:
            del st.session_state[key]
    st.session_state[NAV_KEY] = page
