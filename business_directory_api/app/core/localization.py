"""
Static translation table.

Every user-facing string of the directory (form labels, category names,
sort filter titles, validation and authentication messages) is keyed by
a stable identifier and translated into English and Spanish.  Clients
fetch the table for their language through ``GET /api/v1/i18n/``;
services use ``localize`` to build error messages.
"""

from enum import Enum
from typing import Dict, Optional


class Language(str, Enum):
    english = "en"
    spanish = "es"


DEFAULT_LANGUAGE = Language.spanish

TRANSLATIONS: Dict[str, Dict[Language, str]] = {
    # Login
    "app_title": {Language.english: "Made in NL", Language.spanish: "Hecho en NL"},
    "app_subtitle": {Language.english: "Discover local", Language.spanish: "Descubre lo local"},
    "email_label": {Language.english: "Email", Language.spanish: "Correo electrónico"},
    "email_placeholder": {Language.english: "Enter your email", Language.spanish: "Ingresa tu correo"},
    "password_label": {Language.english: "Password", Language.spanish: "Contraseña"},
    "password_placeholder": {Language.english: "Enter your password", Language.spanish: "Ingresa tu contraseña"},
    "login_button": {Language.english: "LOGIN", Language.spanish: "INICIAR SESIÓN"},
    "forgot_password": {Language.english: "Forgot password?", Language.spanish: "¿Olvidaste tu contraseña?"},
    "no_account": {Language.english: "Don't have an account?", Language.spanish: "¿No tienes cuenta?"},
    "register": {Language.english: "Register!", Language.spanish: "¡Regístrate!"},
    # Registration
    "register_title": {Language.english: "Create Account", Language.spanish: "Crear cuenta"},
    "register_subtitle": {Language.english: "Join our community", Language.spanish: "Únete a nuestra comunidad"},
    "full_name_label": {Language.english: "Full Name", Language.spanish: "Nombre completo"},
    "full_name_placeholder": {
        Language.english: "Enter your full name",
        Language.spanish: "Ingresa tu nombre completo",
    },
    "confirm_password_label": {Language.english: "Confirm Password", Language.spanish: "Confirmar contraseña"},
    "confirm_password_placeholder": {
        Language.english: "Enter your password again",
        Language.spanish: "Ingresa tu contraseña nuevamente",
    },
    "register_button": {Language.english: "REGISTER", Language.spanish: "REGISTRARSE"},
    "back_to_login": {
        Language.english: "Already have an account? Login",
        Language.spanish: "¿Ya tienes cuenta? Inicia sesión",
    },
    # Directory
    "explore_tab": {Language.english: "Explore", Language.spanish: "Explorar"},
    "my_business_tab": {Language.english: "My Business", Language.spanish: "Mi Negocio"},
    "search_placeholder": {
        Language.english: "Search local businesses...",
        Language.spanish: "Buscar negocios locales...",
    },
    "nearby_businesses": {Language.english: "Nearby Businesses", Language.spanish: "Negocios Cercanos"},
    "add_business": {Language.english: "Add Your Business", Language.spanish: "Agregar tu Negocio"},
    "no_businesses_found": {
        Language.english: "No businesses found nearby",
        Language.spanish: "No se encontraron negocios cercanos",
    },
    "distance": {Language.english: "Distance", Language.spanish: "Distancia"},
    "categories": {Language.english: "Categories", Language.spanish: "Categorías"},
    "logout": {Language.english: "Logout", Language.spanish: "Cerrar Sesión"},
    # Settings
    "settings_title": {Language.english: "Settings", Language.spanish: "Configuración"},
    "language_section": {Language.english: "Language", Language.spanish: "Idioma"},
    "language_label": {Language.english: "App Language", Language.spanish: "Idioma de la App"},
    "account_section": {Language.english: "Account", Language.spanish: "Cuenta"},
    "logout_button": {Language.english: "Logout", Language.spanish: "Cerrar Sesión"},
    "about_section": {Language.english: "About", Language.spanish: "Acerca de"},
    "version_label": {Language.english: "Version", Language.spanish: "Versión"},
    "privacy_policy": {Language.english: "Privacy Policy", Language.spanish: "Política de Privacidad"},
    "terms_of_service": {Language.english: "Terms of Service", Language.spanish: "Términos de Servicio"},
    # Categories
    "category_food": {Language.english: "Food & Drinks", Language.spanish: "Alimentos y Bebidas"},
    "category_retail": {Language.english: "Retail", Language.spanish: "Comercio"},
    "category_services": {Language.english: "Services", Language.spanish: "Servicios"},
    "category_entertainment": {Language.english: "Entertainment", Language.spanish: "Entretenimiento"},
    "category_other": {Language.english: "Other", Language.spanish: "Otros"},
    # Sort filters
    "filter_nearest": {Language.english: "Nearest", Language.spanish: "Más cercanos"},
    "filter_top_rated": {Language.english: "Top rated", Language.spanish: "Mejor valorados"},
    "filter_newest": {Language.english: "Newest", Language.spanish: "Más recientes"},
    # Validation
    "error_title": {Language.english: "Error", Language.spanish: "Error"},
    "empty_fields": {Language.english: "Please fill in all fields", Language.spanish: "Por favor llena todos los campos"},
    "invalid_email": {
        Language.english: "Please enter a valid email",
        Language.spanish: "Por favor ingresa un correo electrónico válido",
    },
    "invalid_password": {
        Language.english: "Password must be at least 6 characters",
        Language.spanish: "La contraseña debe tener al menos 6 caracteres",
    },
    "empty_name": {Language.english: "Please enter your name", Language.spanish: "Por favor ingresa tu nombre"},
    "passwords_do_not_match": {
        Language.english: "Passwords do not match",
        Language.spanish: "Las contraseñas no coinciden",
    },
    # Authentication
    "auth_invalid_credentials": {
        Language.english: "Incorrect email or password",
        Language.spanish: "Correo electrónico o contraseña incorrectos",
    },
    "auth_network_error": {
        Language.english: "Connection error. Please check your internet",
        Language.spanish: "Error de conexión. Por favor verifica tu internet",
    },
    "auth_server_error": {
        Language.english: "Server error. Please try again later",
        Language.spanish: "Error del servidor. Por favor intenta más tarde",
    },
    "auth_user_already_exists": {
        Language.english: "This email is already registered",
        Language.spanish: "Este correo electrónico ya está registrado",
    },
    "auth_required": {
        Language.english: "You need to log in first",
        Language.spanish: "Necesitas iniciar sesión primero",
    },
}


def localize(key: str, language: Language = DEFAULT_LANGUAGE) -> str:
    """Return the text for ``key`` in ``language`` or an empty string."""
    return TRANSLATIONS.get(key, {}).get(language, "")


def table(language: Language) -> Dict[str, str]:
    """Flatten the translation table for one language."""
    return {key: values.get(language, "") for key, values in TRANSLATIONS.items()}


def parse_language(header: Optional[str], default: Language = DEFAULT_LANGUAGE) -> Language:
    """Pick a supported language from an ``Accept-Language`` value.

    Entries are tried in order of their ``q`` weight; region suffixes
    are ignored (``es-MX`` counts as Spanish).  Anything unsupported
    falls back to ``default``.
    """
    if not header:
        return default
    candidates = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                weight = 0.0
        candidates.append((-weight, position, tag.strip().lower()))
    for _, _, tag in sorted(candidates):
        primary = tag.split("-", 1)[0]
        for language in Language:
            if primary == language.value:
                return language
    return default
