# backend/i18n.py
# Current locale (ar/en) + UI labels.
from flask import current_app, has_app_context, has_request_context, request

from config import Config
from office_names import translate_office_name

_LABELS = {
    "en": {
        "language": "Language",
        "offices": "Offices",
        "office_name": "Office name",
    },
    "ar": {
        "language": "اللغة",
        "offices": "المكاتب",
        "office_name": "اسم المكتب",
    },
}


def _cfg(name):
    if has_app_context():
        return current_app.config.get(name, getattr(Config, name))
    return getattr(Config, name)


def normalize_lang(code):
    if not code:
        return None
    code = str(code).strip().lower()
    return code if code in _cfg("SUPPORTED_LOCALES") else None


def get_lang() -> str:
    default = _cfg("DEFAULT_LOCALE")
    if not has_request_context():
        return default

    return (
        normalize_lang(request.args.get("lang"))
        or normalize_lang(request.cookies.get(_cfg("LOCALE_COOKIE")))
        or default
    )


def t(key: str, lang: str = None) -> str:
    # Return label in the current language if found; otherwise return key itself
    labels = _LABELS.get(lang or get_lang(), _LABELS["en"])
    return labels.get(key, key)


def office_name(arabic_name):
    """Template helper: office name in the current request's language."""
    return translate_office_name(arabic_name, get_lang())
