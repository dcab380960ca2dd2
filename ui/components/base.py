from dataclasses import dataclass
from html import escape

import streamlit as st

PRIMARY = "#6750A4"  # material primary
ON_BACKGROUND = "#1C1B1F"
ON_SURFACE_VARIANT = "#49454F"
ERROR = "#B3261E"
FIELD_BG = "#F7F5F5"
BACKGROUND_GRADIENT = "linear-gradient(160deg, #F3EDF7 0%, #FFFFFF 55%, #EADDFF 100%)"

# Material Symbols, rendered by Streamlit's markdown
EMAIL_ICON = ":material/mail:"
PHONE_ICON = ":material/call:"
LOCK_ICON = ":material/lock:"
EYE_OPENED_ICON = ":material/visibility:"
EYE_CLOSED_ICON = ":material/visibility_off:"

# Key prefixes styled by inject_base_css
BACKGROUND_KEY_PREFIX = "authui_bg_"
FIELD_KEY_PREFIX = "authui_field_"
ERROR_KEY_SUFFIX = "_error"


@dataclass(frozen=True)
class Spacing:
    space_small: str = "0.5rem"
    space_medium: str = "1rem"
    space_large: str = "2rem"
    space_extra_large: str = "4rem"


SPACING = Spacing()


def inject_base_css():
    # Streamlit drops previous output on rerun, so this runs on every render.
    st.markdown(
        f"""
        <style>
        div[class*="st-key-{BACKGROUND_KEY_PREFIX}"] {{
            background:{BACKGROUND_GRADIENT}; border-radius:16px;
            padding:{SPACING.space_medium};
        }}
        div[class*="st-key-{FIELD_KEY_PREFIX}"] input {{background:{FIELD_BG};}}
        div[class*="st-key-{FIELD_KEY_PREFIX}"][class*="{ERROR_KEY_SUFFIX}"] div[data-baseweb="input"] {{
            border-color:{ERROR};
        }}
        .authui-headline {{font-size:1.75rem; font-weight:500; color:{ON_BACKGROUND}; margin:0;}}
        .authui-divider {{
            width:{SPACING.space_extra_large}; height:2px; background:{PRIMARY};
            margin-bottom:{SPACING.space_large};
        }}
        .authui-field-title {{font-size:1rem; color:{ON_BACKGROUND}; margin-bottom:0.25rem;}}
        .authui-error-text {{text-align:right; font-size:0.875rem; color:{ERROR};}}
        .authui-spacer-small {{height:{SPACING.space_small};}}
        .authui-spacer-medium {{height:{SPACING.space_medium};}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def headline(text: str):
    st.markdown(f"<p class='authui-headline'>{escape(text)}</p>", unsafe_allow_html=True)
    st.markdown("<div class='authui-divider'></div>", unsafe_allow_html=True)


def spacer(size: str = "medium"):
    st.markdown(f"<div class='authui-spacer-{size}'></div>", unsafe_allow_html=True)


def image_background(key: str):
    """Container painted with the app background; use as a context manager."""
    return st.container(key=f"{BACKGROUND_KEY_PREFIX}{key}")
