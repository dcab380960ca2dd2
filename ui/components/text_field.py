"""
Reusable text input used by every auth screen.

The component is a pure renderer plus input forwarder: it shows whatever value
and error it is given and reports every edit through ``on_value_change`` with
the full new string. Validation belongs to the state holder.
"""

from dataclasses import dataclass
from html import escape
from typing import Callable, MutableMapping, Optional

import streamlit as st

from domain.constants import VISIBILITY_KEY_PREFIX
from domain.strings import string_resource
from .base import (
    EYE_CLOSED_ICON, EYE_OPENED_ICON, LOCK_ICON,
    FIELD_KEY_PREFIX, ERROR_KEY_SUFFIX,
)

_AUTOCOMPLETE = {
    "text": "on",
    "email": "email",
    "phone": "tel",
    "password": "current-password",
    "new_password": "new-password",
    "number": "off",
}


@dataclass(frozen=True)
class KeyboardOptions:
    """Input hints handed to the browser."""
    keyboard_type: str = "text"
    autocomplete: Optional[str] = None

    def __post_init__(self):
        if self.keyboard_type not in _AUTOCOMPLETE:
            raise ValueError(f"Unknown keyboard type: {self.keyboard_type}")

    @property
    def autocomplete_hint(self) -> str:
        return self.autocomplete or _AUTOCOMPLETE[self.keyboard_type]


class PasswordVisibility:
    """Masked/unmasked flag owned by a single field instance. Starts masked."""

    def __init__(self, session: MutableMapping, key: str):
        self._session = session
        self._key = key

    @property
    def hidden(self) -> bool:
        return self._session.get(self._key, True)

    def toggle(self):
        self._session[self._key] = not self.hidden

    def forget(self):
        self._session.pop(self._key, None)


def leading_icon_markdown(icon: str, is_error: bool) -> str:
    # icon followed by a vertical divider, both tinted on error
    if is_error:
        return f":red[{icon}] :red[│]"
    return f"{icon} :gray[│]"


def text_field(
    value: str,
    on_value_change: Callable[[str], None],
    placeholder: str,
    content_description: str,
    key: str,
    title: Optional[str] = None,
    error_message: Optional[str] = None,
    leading_icon: Optional[str] = None,
    is_password: bool = False,
    is_error: bool = False,
    is_enabled: bool = True,
    keyboard_options: KeyboardOptions = KeyboardOptions(),
):
    """
    Renders a single-line text input.

    Args:
        value (str): Text currently held by the state holder.
        on_value_change (Callable[[str], None]): Receives the full new value on every edit.
        placeholder (str): Hint shown while the input is empty.
        content_description (str): Accessibility label of the input and its icon.
        key (str): Unique widget key prefix for this field instance.
        title (Optional[str]): Label rendered above the input.
        error_message (Optional[str]): Text rendered below the input when not None.
        leading_icon (Optional[str]): Material icon shortcode shown before the input.
        is_password (bool): Adds the show/hide control and masks the text while hidden.
        is_error (bool): Tints the icon, divider and border with the error colour.
        is_enabled (bool): Disables editing when False.
        keyboard_options (KeyboardOptions): Browser input hints.
    """
    input_key = f"{key}_input"
    visibility = PasswordVisibility(st.session_state, f"{VISIBILITY_KEY_PREFIX}{key}")

    # Keep the widget bound to the holder's value; must happen before instantiation.
    if st.session_state.get(input_key) != value:
        st.session_state[input_key] = value

    def _forward():
        on_value_change(st.session_state[input_key])

    container_key = f"{FIELD_KEY_PREFIX}{key}" + (ERROR_KEY_SUFFIX if is_error else "")
    with st.container(key=container_key):
        if title is not None:
            st.markdown(f"<div class='authui-field-title'>{escape(title)}</div>", unsafe_allow_html=True)

        widths = ([1] if leading_icon is not None else []) + [10] + ([1] if is_password else [])
        columns = iter(st.columns(widths, vertical_alignment="center"))

        if leading_icon is not None:
            with next(columns):
                st.markdown(leading_icon_markdown(leading_icon, is_error), help=content_description)

        masked = is_password and visibility.hidden
        with next(columns):
            st.text_input(
                content_description,
                key=input_key,
                on_change=_forward,
                placeholder=placeholder,
                type="password" if masked else "default",
                disabled=not is_enabled,
                autocomplete=keyboard_options.autocomplete_hint,
                label_visibility="collapsed",
            )

        if is_password:
            with next(columns):
                st.button(
                    EYE_OPENED_ICON if visibility.hidden else EYE_CLOSED_ICON,
                    key=f"{key}_toggle",
                    help=string_resource("show_password" if visibility.hidden else "hide_password"),
                    on_click=visibility.toggle,
                    type="tertiary",
                )

        if error_message is not None:
            st.markdown(f"<div class='authui-error-text'>{escape(error_message)}</div>", unsafe_allow_html=True)


def password_field(
    value: str,
    on_value_change: Callable[[str], None],
    key: str,
    title: Optional[str] = None,
    placeholder: Optional[str] = None,
    error_message: Optional[str] = None,
    is_error: bool = False,
    is_enabled: bool = True,
    keyboard_options: KeyboardOptions = KeyboardOptions("password"),
):
    title = title if title is not None else string_resource("password")
    text_field(
        value=value,
        on_value_change=on_value_change,
        placeholder=placeholder if placeholder is not None else string_resource("input_password"),
        content_description=title,
        key=key,
        title=title,
        error_message=error_message,
        leading_icon=LOCK_ICON,
        is_password=True,
        is_error=is_error,
        is_enabled=is_enabled,
        keyboard_options=keyboard_options,
    )
