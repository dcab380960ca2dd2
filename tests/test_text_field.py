import pytest

from ui.components.text_field import (
    KeyboardOptions, PasswordVisibility, leading_icon_markdown, password_field, text_field,
)
from conftest import widget_call, type_into, markdown_texts, container_keys


def _render(**overrides):
    received = []
    kwargs = dict(
        value="",
        on_value_change=received.append,
        placeholder="Enter your email address",
        content_description="Email",
        key="f",
    )
    kwargs.update(overrides)
    text_field(**kwargs)
    return received


def test_every_edit_forwards_the_full_value(fake_st):
    received = _render()
    type_into(fake_st, "f_input", "a@b.c")
    assert received == ["a", "a@", "a@b", "a@b.", "a@b.c"]


def test_value_is_pushed_into_the_widget_before_render(fake_st):
    fake_st.session_state["f_input"] = "stale"
    _render(value="fresh")
    assert fake_st.session_state["f_input"] == "fresh"


def test_accessibility_text_is_the_collapsed_label(fake_st):
    _render(content_description="Phone number")
    call = widget_call(fake_st.text_input, "f_input")
    assert call.args[0] == "Phone number"
    assert call.kwargs["label_visibility"] == "collapsed"


def test_title_rendered_only_when_given(fake_st):
    _render()
    assert not any("authui-field-title" in t for t in markdown_texts(fake_st))
    _render(title="Email")
    assert any("authui-field-title" in t and "Email" in t for t in markdown_texts(fake_st))


def test_error_message_shown_only_when_present(fake_st):
    _render(error_message=None)
    assert not any("authui-error-text" in t for t in markdown_texts(fake_st))

    _render(error_message="Enter a valid email address", is_error=True)
    errors = [t for t in markdown_texts(fake_st) if "authui-error-text" in t]
    assert len(errors) == 1
    assert "Enter a valid email address" in errors[0]


def test_error_message_is_escaped(fake_st):
    _render(error_message="<b>bad</b>")
    errors = [t for t in markdown_texts(fake_st) if "authui-error-text" in t]
    assert "&lt;b&gt;bad&lt;/b&gt;" in errors[0]


def test_error_flag_tints_icon_and_marks_container(fake_st):
    _render(leading_icon=":material/mail:", is_error=True)
    assert container_keys(fake_st)[-1] == "authui_field_f_error"
    assert ":red[:material/mail:] :red[│]" in markdown_texts(fake_st)

    _render(leading_icon=":material/mail:", is_error=False)
    assert container_keys(fake_st)[-1] == "authui_field_f"


def test_leading_icon_markdown():
    assert leading_icon_markdown(":material/call:", False) == ":material/call: :gray[│]"
    assert leading_icon_markdown(":material/call:", True) == ":red[:material/call:] :red[│]"


def test_disabled_field(fake_st):
    _render(is_enabled=False)
    assert widget_call(fake_st.text_input, "f_input").kwargs["disabled"] is True


def test_keyboard_options_map_to_autocomplete(fake_st):
    _render(keyboard_options=KeyboardOptions("phone"))
    assert widget_call(fake_st.text_input, "f_input").kwargs["autocomplete"] == "tel"
    assert KeyboardOptions("email").autocomplete_hint == "email"
    assert KeyboardOptions("text", autocomplete="username").autocomplete_hint == "username"


def test_unknown_keyboard_type_rejected():
    with pytest.raises(ValueError):
        KeyboardOptions("telepathy")


def test_plain_field_is_never_masked(fake_st):
    _render()
    assert widget_call(fake_st.text_input, "f_input").kwargs["type"] == "default"
    assert not [c for c in fake_st.button.call_args_list if c.kwargs.get("key") == "f_toggle"]


def test_password_visibility_starts_masked_and_double_toggle_restores():
    session = {}
    visibility = PasswordVisibility(session, "k")
    assert visibility.hidden is True
    visibility.toggle()
    assert visibility.hidden is False
    visibility.toggle()
    assert visibility.hidden is True


def test_forgotten_visibility_starts_masked_again():
    session = {}
    visibility = PasswordVisibility(session, "k")
    visibility.toggle()
    visibility.forget()
    assert PasswordVisibility(session, "k").hidden is True


def test_password_toggle_flips_masking_on_rerender(fake_st):
    _render(is_password=True)
    assert widget_call(fake_st.text_input, "f_input").kwargs["type"] == "password"
    toggle = widget_call(fake_st.button, "f_toggle")
    assert toggle.kwargs["help"] == "Show password"

    toggle.kwargs["on_click"]()
    _render(is_password=True)
    assert widget_call(fake_st.text_input, "f_input").kwargs["type"] == "default"
    assert widget_call(fake_st.button, "f_toggle").kwargs["help"] == "Hide password"

    widget_call(fake_st.button, "f_toggle").kwargs["on_click"]()
    _render(is_password=True)
    assert widget_call(fake_st.text_input, "f_input").kwargs["type"] == "password"


def test_password_field_defaults(fake_st):
    received = []
    password_field(value="", on_value_change=received.append, key="pw")
    call = widget_call(fake_st.text_input, "pw_input")
    assert call.args[0] == "Password"
    assert call.kwargs["placeholder"] == "Enter your password"
    assert call.kwargs["type"] == "password"
    assert call.kwargs["autocomplete"] == "current-password"
    type_into(fake_st, "pw_input", "s3")
    assert received == ["s", "s3"]
