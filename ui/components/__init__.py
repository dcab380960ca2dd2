"""
Reusable UI components shared by the auth screens.

- `base`: theme colours, spacing, icons, CSS injection and layout helpers.
- `text_field`: the configurable text input and its password variant.
- `button`: the primary action button.
- `clickable_text`: annotated strings and the link-style renderer.
- `notification`: transient toast messages.

Screens import from here (`from ui.components import text_field`).
"""

from .base import (
    SPACING,
    EMAIL_ICON,
    PHONE_ICON,
    LOCK_ICON,
    PRIMARY,
    ON_SURFACE_VARIANT,
    inject_base_css,
    headline,
    spacer,
    image_background,
)

from .text_field import (
    KeyboardOptions,
    PasswordVisibility,
    text_field,
    password_field,
)

from .button import primary_button

from .clickable_text import (
    AnnotatedString,
    AnnotatedStringBuilder,
    SpanStyle,
    clickable_text,
)

from .notification import SnackbarHost
