import logging
from typing import Callable, Optional

import streamlit as st

from domain.constants import CLICKABLE_TEXT_TAG, PAGE_REGISTER
from domain.models import (
    LoginState, LoginAction, OnLoginEmailChange, OnLoginPasswordChange,
    OnLoginSubmit, OnRegisterLinkClick, as_text,
)
from domain.strings import string_resource
from services.login_store import LoginStore
from ui.components import (
    EMAIL_ICON, PRIMARY, ON_SURFACE_VARIANT,
    AnnotatedString, AnnotatedStringBuilder, KeyboardOptions, SnackbarHost, SpanStyle,
    clickable_text, headline, image_background, inject_base_css,
    password_field, primary_button, spacer, text_field,
)
from ui.navigation import navigate

logger = logging.getLogger(__name__)


def register_link_text() -> AnnotatedString:
    builder = AnnotatedStringBuilder()
    with builder.with_style(SpanStyle(color=ON_SURFACE_VARIANT)):
        builder.append(string_resource("no_account"))
        builder.append(" ")
    with builder.string_annotation(CLICKABLE_TEXT_TAG, string_resource("no_account")):
        with builder.with_style(SpanStyle(color=PRIMARY, font_weight="bold")):
            builder.append(string_resource("register_link_text"))
    return builder.to_annotated_string()


def login_screen(state: LoginState, on_action: Callable[[LoginAction], None], key: str = "login"):
    inject_base_css()
    with image_background(key):
        headline(string_resource("login_title"))

        text_field(
            value=state.email,
            on_value_change=lambda v: on_action(OnLoginEmailChange(v)),
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

        password_field(
            value=state.password,
            on_value_change=lambda v: on_action(OnLoginPasswordChange(v)),
            key=f"{key}_password",
            error_message=as_text(state.password_error),
            is_error=state.password_error is not None,
        )
        spacer("small")

        primary_button(string_resource("login_btn_text"), on_click=lambda: on_action(OnLoginSubmit()), key=f"{key}_submit")

        link = register_link_text()

        def _on_link_click(offset: int):
            if link.get_string_annotations(CLICKABLE_TEXT_TAG, offset, offset):
                on_action(OnRegisterLinkClick())

        clickable_text(link, on_click=_on_link_click, key=f"{key}_register")


def login_screen_root(state: LoginState, on_action, navigate_to_register: Callable[[], None],
                      notifier: Optional[SnackbarHost] = None, key: str = "login"):
    notifier = notifier or SnackbarHost()

    def _dispatch(action: LoginAction):
        on_action(action)
        if isinstance(action, OnLoginSubmit):
            try:
                notifier.show(string_resource("login_pressed"))
            except Exception:
                logger.warning("Could not show the login notification", exc_info=True)
        elif isinstance(action, OnRegisterLinkClick):
            navigate_to_register()

    login_screen(state, _dispatch, key=key)


def view():
    store = LoginStore(st.session_state)
    login_screen_root(store.state, store.dispatch, navigate_to_register=lambda: navigate(PAGE_REGISTER))
