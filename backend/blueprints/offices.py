# backend/blueprints/offices.py
from flask import Blueprint, request, jsonify
from marshmallow import EXCLUDE, Schema, fields

from i18n import get_lang, normalize_lang
from office_names import has_english_translation, list_offices, translate_office_name

bp = Blueprint("offices", __name__)


class TranslateQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True)
    lang = fields.Str(load_default=None)


_translate_query = TranslateQuerySchema()


@bp.get("/api/offices")
def api_offices():
    lang = normalize_lang(request.args.get("lang")) or get_lang()
    rows = list_offices(lang)
    return jsonify({"lang": lang, "count": len(rows), "offices": rows})


@bp.get("/api/offices/translate")
def api_translate():
    # raises ValidationError -> 400 (see app error handlers)
    args = _translate_query.load(request.args.to_dict())

    name = args["name"]
    # any non-"ar" value translates, so pass it through untouched
    lang = args["lang"] or get_lang()

    return jsonify({
        "name": name,
        "lang": lang,
        "display_name": translate_office_name(name, lang),
        "has_translation": has_english_translation(name),
    })
