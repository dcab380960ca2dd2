import logging
from dataclasses import replace
from typing import Callable, MutableMapping, Optional

from domain.constants import LOGIN_STATE_KEY
from domain.models import (
    LoginState, LoginAction, OnLoginEmailChange, OnLoginPasswordChange,
    OnLoginSubmit, OnRegisterLinkClick, StringResource,
)
from services import validation

logger = logging.getLogger(__name__)


def reduce(state: LoginState, action: LoginAction, on_login: Optional[Callable[[LoginState], None]] = None) -> LoginState:
    if isinstance(action, OnLoginEmailChange):
        return replace(state, email=action.email, email_error=None)
    if isinstance(action, OnLoginPasswordChange):
        return replace(state, password=action.password, password_error=None)
    if isinstance(action, OnLoginSubmit):
        # Length rules apply at sign-up only.
        checked = replace(
            state,
            email_error=validation.validate_email(state.email),
            password_error=None if state.password else StringResource("error_password_required"),
        )
        if checked.email_error is None and checked.password_error is None:
            logger.info("Login requested for %s", checked.email)
            if on_login is not None:
                on_login(checked)
        return checked
    if isinstance(action, OnRegisterLinkClick):
        return state
    raise TypeError(f"Unsupported login action: {action!r}")


class LoginStore:
    def __init__(self, session: MutableMapping, on_login=None, key: str = LOGIN_STATE_KEY):
        self._session = session
        self._on_login = on_login
        self._key = key

    @property
    def state(self) -> LoginState:
        if self._key not in self._session:
            self._session[self._key] = LoginState()
        return self._session[self._key]

    def dispatch(self, action: LoginAction):
        logger.debug("login action: %s", type(action).__name__)
        self._session[self._key] = reduce(self.state, action, self._on_login)
