import logging
from typing import Callable, Optional

import streamlit as st

from domain.constants import CLICKABLE_TEXT_TAG, PAGE_LOGIN
from domain.models import (
    RegisterState, RegisterAction, OnEmailChange, OnNumberPhoneChange,
    OnPasswordChange, OnRepeatPasswordChange, OnRegisterClick, OnLoginClick, as_text,
)
from domain.strings import string_resource
from services.register_store import RegisterStore
from ui.components import (
    EMAIL_ICON, PHONE_ICON, PRIMARY, ON_SURFACE_VARIANT,
    AnnotatedString, AnnotatedStringBuilder, KeyboardOptions, SnackbarHost, SpanStyle,
    clickable_text, headline, image_background, inject_base_css,
    password_field, primary_button, spacer, text_field,
)
from ui.navigation import navigate

logger = logging.getLogger(__name__)

ActionSink = Callable[[RegisterAction], None]


def login_link_text() -> AnnotatedString:
    """'Already have an account? Log in' with only the last part clickable."""
    builder = AnnotatedStringBuilder()
    with builder.with_style(SpanStyle(color=ON_SURFACE_VARIANT, font_weight="normal")):
        builder.append(string_resource("have_an_account"))
        builder.append(" ")
    with builder.string_annotation(CLICKABLE_TEXT_TAG, string_resource("have_an_account")):
        with builder.with_style(SpanStyle(color=PRIMARY, font_weight="bold")):
            builder.append(string_resource("login_btn_text"))
    return builder.to_annotated_string()


def register_screen(state: RegisterState, on_action: ActionSink, key: str = "register"):
    """Renders the registration form from ``state``; every interaction goes to ``on_action``."""
    inject_base_css()
    with image_background(key):
        headline(string_resource("create_account"))

        text_field(
            value=state.email,
            on_value_change=lambda v: on_action(OnEmailChange(v)),
            placeholder=string_resource("input_email"),
            content_description=string_resource("email"),
            key=f"{key}_email",
            title=string_resource("email"),
            error_message=as_text(state.email_error),
            leading_icon=EMAIL_ICON,
            is_error=state.email_error is not None,
            keyboard_options=KeyboardOptions("email"),
        )
        spacer("medium")

        text_field(
            value=state.number_phone,
            on_value_change=lambda v: on_action(OnNumberPhoneChange(v)),
            placeholder=string_resource("example_phone"),
            content_description=string_resource("phone"),
            key=f"{key}_phone",
            title=string_resource("phone"),
            error_message=as_text(state.number_phone_error),
            leading_icon=PHONE_ICON,
            is_error=state.number_phone_error is not None,
            keyboard_options=KeyboardOptions("phone"),
        )
        spacer("medium")

        password_field(
            value=state.password,
            on_value_change=lambda v: on_action(OnPasswordChange(v)),
            key=f"{key}_password",
            error_message=as_text(state.password_error),
            is_error=state.password_error is not None,
            keyboard_options=KeyboardOptions("new_password"),
        )
        spacer("medium")

        password_field(
            value=state.repeat_password,
            on_value_change=lambda v: on_action(OnRepeatPasswordChange(v)),
            key=f"{key}_repeat_password",
            title=string_resource("confirm_password"),
            placeholder=string_resource("repeat_password"),
            error_message=as_text(state.repeat_password_error),
            is_error=state.repeat_password_error is not None,
            keyboard_options=KeyboardOptions("new_password"),
        )
        spacer("small")

        primary_button(
            string_resource("register_btn_text"),
            on_click=lambda: on_action(OnRegisterClick()),
            key=f"{key}_submit",
        )

        link = login_link_text()

        def _on_link_click(offset: int):
            if link.get_string_annotations(CLICKABLE_TEXT_TAG, offset, offset):
                on_action(OnLoginClick())

        clickable_text(link, on_click=_on_link_click, key=f"{key}_login")


def register_screen_root(
    state: RegisterState,
    on_action: ActionSink,
    navigate_to_login: Callable[[], None],
    notifier: Optional[SnackbarHost] = None,
    key: str = "register",
):
    """
    Binds the registration form to its holder and side effects.

    Every action reaches ``on_action`` first. Afterwards a submit shows a
    transient notification and a login-link tap calls ``navigate_to_login``.
    """
    notifier = notifier or SnackbarHost()

    def _dispatch(action: RegisterAction):
        on_action(action)
        if isinstance(action, OnRegisterClick):
            try:
                notifier.show(string_resource("register_pressed"))
            except Exception:
                logger.warning("Could not show the registration notification", exc_info=True)
        elif isinstance(action, OnLoginClick):
            navigate_to_login()

    register_screen(state, _dispatch, key=key)


def view():
    store = RegisterStore(st.session_state)
    register_screen_root(store.state, store.dispatch, navigate_to_login=lambda: navigate(PAGE_LOGIN))
