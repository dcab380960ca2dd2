"""Registration state holder.

`reduce` is the pure transition function; `RegisterStore` keeps the current
snapshot in a session mapping (normally ``st.session_state``) so it survives
reruns. The registration call itself is delegated to ``on_register``.
"""
import logging
from dataclasses import replace
from typing import Callable, MutableMapping, Optional

from domain.constants import REGISTER_STATE_KEY
from domain.models import (
    RegisterState, RegisterAction, OnEmailChange, OnNumberPhoneChange,
    OnPasswordChange, OnRepeatPasswordChange, OnRegisterClick, OnLoginClick,
)
from services import validation

logger = logging.getLogger(__name__)

OnRegister = Callable[[RegisterState], None]


def validate(state: RegisterState) -> RegisterState:
    return replace(
        state,
        email_error=validation.validate_email(state.email),
        number_phone_error=validation.validate_phone(state.number_phone),
        password_error=validation.validate_password(state.password),
        repeat_password_error=validation.validate_repeat_password(state.password, state.repeat_password),
    )


def reduce(state: RegisterState, action: RegisterAction, on_register: Optional[OnRegister] = None) -> RegisterState:
    if isinstance(action, OnEmailChange):
        return replace(state, email=action.email, email_error=None)
    if isinstance(action, OnNumberPhoneChange):
        return replace(state, number_phone=action.number_phone, number_phone_error=None)
    if isinstance(action, OnPasswordChange):
        return replace(state, password=action.password, password_error=None)
    if isinstance(action, OnRepeatPasswordChange):
        return replace(state, repeat_password=action.repeat_password, repeat_password_error=None)
    if isinstance(action, OnRegisterClick):
        checked = validate(state)
        if checked.has_errors:
            logger.info("Registration rejected: invalid fields")
            return checked
        logger.info("Registration requested for %s", checked.email)
        if on_register is not None:
            on_register(checked)
        return checked
    if isinstance(action, OnLoginClick):
        # Navigation is a side effect of the screen root, not a state change.
        return state
    raise TypeError(f"Unsupported register action: {action!r}")


class RegisterStore:
    def __init__(self, session: MutableMapping, on_register: Optional[OnRegister] = None, key: str = REGISTER_STATE_KEY):
        self._session = session
        self._on_register = on_register
        self._key = key

    @property
    def state(self) -> RegisterState:
        if self._key not in self._session:
            self._session[self._key] = RegisterState()
        return self._session[self._key]

    def dispatch(self, action: RegisterAction):
        logger.debug("register action: %s", type(action).__name__)
        self._session[self._key] = reduce(self.state, action, self._on_register)

    def reset(self):
        self._session[self._key] = RegisterState()
