import logging
import os
import sys

from flask import Flask, jsonify, redirect, url_for
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from config import Config  # noqa: E402
from i18n import get_lang, office_name, t  # noqa: E402
from office_names import OFFICE_NAMES_EN  # noqa: E402
from blueprints import lang as lang_bp  # noqa: E402
from blueprints import offices as offices_bp  # noqa: E402

log = logging.getLogger(__name__)


def _register_error_handlers(app: Flask):
    @app.errorhandler(ValidationError)
    def handle_validation(e):
        return jsonify({"error": "validation", "messages": e.messages}), 400

    @app.errorhandler(HTTPException)
    def handle_http(e):
        # keep the exception's headers (Allow on 405, ...) with a JSON body
        resp = e.get_response()
        resp.set_data(app.json.dumps({"error": e.name, "description": e.description}))
        resp.content_type = "application/json"
        return resp

    @app.errorhandler(Exception)
    def handle_exception(e):
        """Log unexpected errors and hide details from the client."""
        log.exception("An error occurred: %s", e)
        return jsonify({"error": "An internal error occurred. Please try again later."}), 500


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.secret_key = app.config["SECRET_KEY"]
    app.json.ensure_ascii = app.config["JSON_AS_ASCII"]

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    @app.context_processor
    def inject_globals():
        return dict(tr=t, office_name=office_name, lang=get_lang())

    for module in (offices_bp, lang_bp):
        app.register_blueprint(module.bp)
        log.info("[OK] Registered blueprint: %s", module.bp.name)

    _register_error_handlers(app)

    @app.get("/")
    def home():
        return redirect(url_for("offices.api_offices"))

    log.info(
        "[OK] %d office names loaded, default locale=%s",
        len(OFFICE_NAMES_EN), app.config["DEFAULT_LOCALE"],
    )
    return app


if __name__ == "__main__":
    app = create_app()
    print("==========================================")
    print("[OK] Starting server...")
    print("Open: http://127.0.0.1:5000")
    print("==========================================")
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "5000")), debug=False)
