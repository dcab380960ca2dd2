"""Screen modules for manual routing.

The app uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each screen lives under `views/`, exposes a `view()`
function bound to its session-backed state holder, and a `*_screen` /
`*_screen_root` pair that can be rendered with any state and action sink.

Add a screen as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
