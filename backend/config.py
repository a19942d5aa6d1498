import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# .env next to the backend (optional file)
load_dotenv(os.path.join(BASE_DIR, ".env"))

SUPPORTED_LOCALES = ("ar", "en")


def _default_locale() -> str:
    code = (os.environ.get("DEFAULT_LOCALE") or "ar").strip().lower()
    return code if code in SUPPORTED_LOCALES else "ar"


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")

    DEFAULT_LOCALE = _default_locale()
    SUPPORTED_LOCALES = SUPPORTED_LOCALES
    LOCALE_COOKIE = os.environ.get("LOCALE_COOKIE", "lang")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # keep Arabic readable in JSON responses
    JSON_AS_ASCII = False
