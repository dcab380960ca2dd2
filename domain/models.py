from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from domain.strings import string_resource


@dataclass(frozen=True)
class DynamicString:
    value: str

    def as_string(self) -> str:
        return self.value


@dataclass(frozen=True)
class StringResource:
    key: str
    args: Tuple = field(default_factory=tuple)

    def as_string(self) -> str:
        return string_resource(self.key, *self.args)


# Anything handed to the UI as an error message.
UiText = Union[DynamicString, StringResource]


@dataclass(frozen=True)
class RegisterState:
    """Snapshot rendered by the registration screen. Replaced, never mutated."""
    email: str = ""
    number_phone: str = ""
    password: str = ""
    repeat_password: str = ""
    email_error: Optional[UiText] = None
    number_phone_error: Optional[UiText] = None
    password_error: Optional[UiText] = None
    repeat_password_error: Optional[UiText] = None

    @property
    def has_errors(self) -> bool:
        return any(e is not None for e in (
            self.email_error, self.number_phone_error,
            self.password_error, self.repeat_password_error))


@dataclass(frozen=True)
class OnEmailChange:
    email: str


@dataclass(frozen=True)
class OnNumberPhoneChange:
    number_phone: str


@dataclass(frozen=True)
class OnPasswordChange:
    password: str


@dataclass(frozen=True)
class OnRepeatPasswordChange:
    repeat_password: str


@dataclass(frozen=True)
class OnRegisterClick:
    pass


@dataclass(frozen=True)
class OnLoginClick:
    pass


RegisterAction = Union[OnEmailChange, OnNumberPhoneChange, OnPasswordChange,
                       OnRepeatPasswordChange, OnRegisterClick, OnLoginClick]
REGISTER_ACTIONS = (OnEmailChange, OnNumberPhoneChange, OnPasswordChange,
                    OnRepeatPasswordChange, OnRegisterClick, OnLoginClick)


@dataclass(frozen=True)
class LoginState:
    email: str = ""
    password: str = ""
    email_error: Optional[UiText] = None
    password_error: Optional[UiText] = None


@dataclass(frozen=True)
class OnLoginEmailChange:
    email: str


@dataclass(frozen=True)
class OnLoginPasswordChange:
    password: str


@dataclass(frozen=True)
class OnLoginSubmit:
    pass


@dataclass(frozen=True)
class OnRegisterLinkClick:
    pass


LoginAction = Union[OnLoginEmailChange, OnLoginPasswordChange, OnLoginSubmit, OnRegisterLinkClick]
LOGIN_ACTIONS = (OnLoginEmailChange, OnLoginPasswordChange, OnLoginSubmit, OnRegisterLinkClick)


def as_text(error: Optional[UiText]) -> Optional[str]:
    """Resolved message, or None when there is no error."""
    return error.as_string() if error is not None else None
