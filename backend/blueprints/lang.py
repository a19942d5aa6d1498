# backend/blueprints/lang.py
from urllib.parse import urlsplit

from flask import Blueprint, current_app, redirect, request, url_for

from i18n import normalize_lang

bp = Blueprint("lang", __name__)


def _back_url():
    # only go back to a page on this host
    ref = request.referrer
    if ref and urlsplit(ref).netloc == request.host:
        return ref
    return url_for("offices.api_offices")


@bp.route("/lang/<code>")
def set_lang(code):
    lang = normalize_lang(code) or current_app.config["DEFAULT_LOCALE"]

    resp = redirect(_back_url())
    resp.set_cookie(
        current_app.config["LOCALE_COOKIE"],
        lang,
        max_age=60 * 60 * 24 * 365,
        samesite="Lax",
    )
    return resp
