import importlib
import os
import sys
from unittest.mock import MagicMock

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# `ui.components` re-exports functions named like their modules, so resolve
# the modules themselves by dotted path.
UI_MODULES = tuple(importlib.import_module(name) for name in (
    "ui.components.base",
    "ui.components.button",
    "ui.components.clickable_text",
    "ui.components.notification",
    "ui.components.text_field",
    "ui.navigation",
    "views.register",
    "views.login",
    "app",
))


def _columns(spec, **kwargs):
    count = spec if isinstance(spec, int) else len(spec)
    return [MagicMock() for _ in range(count)]


@pytest.fixture
def fake_st(monkeypatch):
    """A MagicMock standing in for `streamlit` in every UI module.

    `session_state` is a plain dict so widget keys can be read and written the
    way Streamlit does between callback and rerun.
    """
    st_mock = MagicMock()
    st_mock.session_state = {}
    st_mock.query_params = {}
    st_mock.columns.side_effect = _columns
    for module in UI_MODULES:
        monkeypatch.setattr(module, "st", st_mock)
    return st_mock


def widget_call(widget, key):
    """Last call of a mocked widget function made with ``key``."""
    calls = [c for c in widget.call_args_list if c.kwargs.get("key") == key]
    assert calls, f"no widget rendered with key {key!r}"
    return calls[-1]


def type_into(st_mock, input_key, text):
    """Simulate typing ``text`` one character at a time into a rendered input."""
    on_change = widget_call(st_mock.text_input, input_key).kwargs["on_change"]
    for i in range(1, len(text) + 1):
        st_mock.session_state[input_key] = text[:i]
        on_change()


def markdown_texts(st_mock):
    return [c.args[0] for c in st_mock.markdown.call_args_list if c.args]


def container_keys(st_mock):
    return [c.kwargs.get("key") for c in st_mock.container.call_args_list]
