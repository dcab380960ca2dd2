"""
Centralized constants shared by views, services and the router, so that
session keys and page identifiers have a single source of truth.
"""

# Page keys used by the router in `app.py`
PAGE_REGISTER = "register"
PAGE_LOGIN = "login"
DEFAULT_PAGE = PAGE_REGISTER

# st.session_state keys
NAV_KEY = "current_page"
# Prefix of per-field password visibility flags; cleared when the page changes
VISIBILITY_KEY_PREFIX = "authui_visibility:"
REGISTER_STATE_KEY = "register_state"
LOGIN_STATE_KEY = "login_state"

# Annotation tag carried by the clickable part of a link fragment
CLICKABLE_TEXT_TAG = "clickable_text"
