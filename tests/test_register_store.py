import dataclasses

import pytest

from domain.models import (
    RegisterState, StringResource, DynamicString, OnEmailChange, OnNumberPhoneChange,
    OnPasswordChange, OnRepeatPasswordChange, OnRegisterClick, OnLoginClick, REGISTER_ACTIONS,
)
from services import register_store
from services.register_store import RegisterStore, reduce

VALID = RegisterState(email="a@b.com", number_phone="5551234567", password="longenough", repeat_password="longenough")


def test_state_is_immutable():
    state = RegisterState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.email = "x"


def test_field_change_returns_new_snapshot():
    state = RegisterState()
    new = reduce(state, OnEmailChange("a"))
    assert new is not state
    assert new.email == "a"
    assert state.email == ""


def test_field_change_clears_only_its_error():
    state = RegisterState(email_error=DynamicString("bad"), password_error=DynamicString("short"))
    new = reduce(state, OnEmailChange("a@b.com"))
    assert new.email_error is None
    assert new.password_error == DynamicString("short")


@pytest.mark.parametrize("action,field,value", [
    (OnNumberPhoneChange("555"), "number_phone", "555"),
    (OnPasswordChange("pw"), "password", "pw"),
    (OnRepeatPasswordChange("pw2"), "repeat_password", "pw2"),
])
def test_each_change_updates_its_field(action, field, value):
    assert getattr(reduce(RegisterState(), action), field) == value


def test_submit_with_empty_form_reports_every_field():
    new = reduce(RegisterState(), OnRegisterClick())
    assert new.email_error == StringResource("error_email_required")
    assert new.number_phone_error == StringResource("error_phone_required")
    assert new.password_error == StringResource("error_password_required")
    assert new.repeat_password_error == StringResource("error_password_required")


def test_submit_reports_mismatch():
    state = dataclasses.replace(VALID, repeat_password="different1")
    new = reduce(state, OnRegisterClick())
    assert new.repeat_password_error.as_string() == "Passwords do not match"
    assert new.email_error is None


def test_valid_submit_calls_collaborator_once():
    calls = []
    new = reduce(VALID, OnRegisterClick(), on_register=calls.append)
    assert calls == [new]
    assert not new.has_errors


def test_invalid_submit_skips_collaborator():
    calls = []
    reduce(RegisterState(), OnRegisterClick(), on_register=calls.append)
    assert calls == []


def test_login_click_keeps_state():
    assert reduce(VALID, OnLoginClick()) is VALID


def test_unknown_action_rejected():
    with pytest.raises(TypeError):
        reduce(RegisterState(), object())


def test_every_variant_is_handled():
    for action_type in REGISTER_ACTIONS:
        fields = dataclasses.fields(action_type)
        action = action_type(*["x" for _ in fields])
        assert isinstance(reduce(RegisterState(), action), RegisterState)


def test_store_persists_in_session_mapping():
    session = {}
    store = RegisterStore(session)
    assert store.state == RegisterState()
    store.dispatch(OnEmailChange("a"))
    store.dispatch(OnEmailChange("ab"))
    assert session["register_state"].email == "ab"
    assert RegisterStore(session).state.email == "ab"
    store.reset()
    assert store.state == RegisterState()


def test_store_passes_collaborator():
    calls = []
    store = RegisterStore({}, on_register=calls.append)
    for action in (OnEmailChange(VALID.email), OnNumberPhoneChange(VALID.number_phone),
                   OnPasswordChange(VALID.password), OnRepeatPasswordChange(VALID.repeat_password),
                   OnRegisterClick()):
        store.dispatch(action)
    assert len(calls) == 1
    assert calls[0].email == "a@b.com"


def test_validate_is_pure():
    state = RegisterState()
    register_store.validate(state)
    assert state == RegisterState()
