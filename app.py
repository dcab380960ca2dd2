import logging

import streamlit as st

from domain.constants import PAGE_REGISTER, PAGE_LOGIN, DEFAULT_PAGE, NAV_KEY
from domain.strings import string_resource
from ui.navigation import current_page
from utils import config
from utils.log import configure_logging

# Import the page rendering functions from the view modules
from views import register, login

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a page key to its label resource and rendering function.
PAGE_REGISTRY = {
    PAGE_REGISTER: {
        "label": "create_account",
        "render_func": register.view,
    },
    PAGE_LOGIN: {
        "label": "login_btn_text",
        "render_func": login.view,
    },
}


def main():
    """
    Main application router.

    Renders the page named by ``st.session_state[NAV_KEY]``. Screens switch
    pages from their callbacks through `ui.navigation.navigate`; the query
    parameter only seeds the first run so links can open a given screen.
    """
    configure_logging()
    st.set_page_config(page_title=config.APP_TITLE, page_icon=":material/lock:", layout="centered")

    if NAV_KEY not in st.session_state:
        requested = st.query_params.get("page")
        st.session_state[NAV_KEY] = requested if requested in PAGE_REGISTRY else DEFAULT_PAGE

    page_key = current_page()
    if page_key not in PAGE_REGISTRY:
        logger.warning("Unknown page %r, falling back to %s", page_key, DEFAULT_PAGE)
        page_key = st.session_state[NAV_KEY] = DEFAULT_PAGE

    st.query_params["page"] = page_key
    page = PAGE_REGISTRY[page_key]
    logger.debug("render page %s (%s)", page_key, string_resource(page["label"]))
    page["render_func"]()


if __name__ == "__main__":
    main()
