"""
Localised string table for the auth screens.

Views never hard-code user-facing text; they look it up by key with
`string_resource`. The active locale comes from `utils.config.LOCALE` unless
one is passed explicitly.
"""

from typing import Dict

from utils import config

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "app_name": "AuthUI",
        "create_account": "Create account",
        "email": "Email",
        "input_email": "Enter your email address",
        "phone": "Phone number",
        "example_phone": "e.g. 5551234567",
        "password": "Password",
        "input_password": "Enter your password",
        "confirm_password": "Confirm password",
        "repeat_password": "Repeat your password",
        "show_password": "Show password",
        "hide_password": "Hide password",
        "register_btn_text": "Create account",
        "have_an_account": "Already have an account?",
        "login_btn_text": "Log in",
        "login_title": "Welcome back",
        "no_account": "Don't have an account?",
        "register_link_text": "Sign up",
        "register_pressed": "Create account button pressed",
        "login_pressed": "Log in button pressed",
        "error_email_required": "Email is required",
        "error_email_invalid": "Enter a valid email address",
        "error_phone_required": "Phone number is required",
        "error_phone_invalid": "Phone number must have between {0} and {1} digits",
        "error_password_required": "Password is required",
        "error_password_short": "Password must have at least {0} characters",
        "error_passwords_mismatch": "Passwords do not match",
    },
    "es": {
        "app_name": "AuthUI",
        "create_account": "Crear cuenta",
        "email": "Correo electrónico",
        "input_email": "Ingresar el correo electrónico",
        "phone": "Teléfono",
        "example_phone": "Ej. 5551234567",
        "password": "Contraseña",
        "input_password": "Ingresar la contraseña",
        "confirm_password": "Confirmar contraseña",
        "repeat_password": "Repetir la contraseña",
        "show_password": "Mostrar contraseña",
        "hide_password": "Ocultar contraseña",
        "register_btn_text": "Crear cuenta",
        "have_an_account": "¿Ya tienes una cuenta?",
        "login_btn_text": "Iniciar sesión",
        "login_title": "Bienvenido de nuevo",
        "no_account": "¿No tienes una cuenta?",
        "register_link_text": "Regístrate",
        "register_pressed": "Se presionó el botón de Crear cuenta",
        "login_pressed": "Se presionó el botón de Iniciar sesión",
        "error_email_required": "El correo es obligatorio",
        "error_email_invalid": "Ingresa un correo válido",
        "error_phone_required": "El teléfono es obligatorio",
        "error_phone_invalid": "El teléfono debe tener entre {0} y {1} dígitos",
        "error_password_required": "La contraseña es obligatoria",
        "error_password_short": "La contraseña debe tener al menos {0} caracteres",
        "error_passwords_mismatch": "Las contraseñas no coinciden",
    },
}


class MissingStringResource(KeyError):
    """Raised when a key is absent from the requested locale."""


def string_resource(key: str, *args, locale: str = None) -> str:
    table = STRINGS.get(locale or config.LOCALE, STRINGS["en"])
    try:
        text = table[key]
    except KeyError:
        raise MissingStringResource(key) from None
    return text.format(*args) if args else text
