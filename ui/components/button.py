from typing import Callable

import streamlit as st


def primary_button(text: str, on_click: Callable[[], None], key: str, is_enabled: bool = True):
    """Full-width filled button used for the main action of a screen."""
    st.button(
        text,
        key=key,
        on_click=on_click,
        type="primary",
        disabled=not is_enabled,
        width="stretch",
    )
