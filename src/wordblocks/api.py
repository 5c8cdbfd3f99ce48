"""HTTP API over a Repository.

Routes translate requests into repository calls and serialize the records
with ``to_dict``. Missing records become 404s and payloads failing
validation become 400s.
"""

from __future__ import annotations

import logging

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from wordblocks.config import Settings
from wordblocks.exceptions import ValidationError
from wordblocks.repository import Repository
from wordblocks.validation import parse_morpheme_payload, parse_word_payload

logger = logging.getLogger(__name__)

EXTENSION_KEY = "wordblocks"

bp = Blueprint("wordblocks", __name__)


def create_app(
    repository: Repository | None = None,
    settings: Settings | None = None,
) -> Flask:
    """Application factory.

    Args:
        repository: Store to serve. A freshly seeded one is built if omitted.
        settings: Server settings; read from the environment if omitted.
    """
    if settings is None:
        settings = Settings.from_env()
    if repository is None:
        repository = Repository(seed_path=settings.seed_file)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[EXTENSION_KEY] = repository
    origins = settings.cors_origins
    if "*" in origins:
        origins = "*"
    else:
        origins = list(origins)
    CORS(app, resources={r"/api/*": {"origins": origins}})
    app.register_blueprint(bp)

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({"message": "Resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"message": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Server error on {request.method} {request.path}: {error}")
        return jsonify({"message": "Internal server error"}), 500

    logger.info(
        f"Created app with {repository.word_count} words and "
        f"{repository.morpheme_count} morphemes"
    )
    return app


def get_repository() -> Repository:
    return current_app.extensions[EXTENSION_KEY]


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------

@bp.route("/api/words", methods=["GET"])
def list_words():
    search = request.args.get("search")
    words = get_repository().list_words(search)
    return jsonify([w.to_dict() for w in words])


@bp.route("/api/words/<word>", methods=["GET"])
def get_word(word):
    record = get_repository().get_word(word)
    if record is None:
        return jsonify({"message": "Word not found"}), 404
    return jsonify(record.to_dict())


@bp.route("/api/words/<word>/morphemes", methods=["GET"])
def get_word_morphemes(word):
    parts = get_repository().resolve_components(word)
    if parts is None:
        return jsonify({"message": "Word not found"}), 404
    return jsonify([
        {
            "type": kind.value,
            "text": text,
            "morpheme": morpheme.to_dict() if morpheme else None,
        }
        for kind, text, morpheme in parts
    ])


@bp.route("/api/words", methods=["POST"])
def create_word():
    try:
        payload = parse_word_payload(request.get_json(silent=True))
    except ValidationError as e:
        logger.debug(f"Rejected word payload: {e}")
        return jsonify({"message": "Invalid word data", "error": str(e)}), 400
    record = get_repository().create_word(**payload)
    return jsonify(record.to_dict()), 201


# ---------------------------------------------------------------------------
# Morphemes
# ---------------------------------------------------------------------------

@bp.route("/api/morphemes/type/<kind>", methods=["GET"])
def list_morphemes_by_kind(kind):
    morphemes = get_repository().list_morphemes_by_kind(kind)
    return jsonify([m.to_dict() for m in morphemes])


@bp.route("/api/morphemes/<text>/<kind>", methods=["GET"])
def get_morpheme(text, kind):
    morpheme = get_repository().get_morpheme(text, kind)
    if morpheme is None:
        return jsonify({"message": "Morpheme not found"}), 404
    return jsonify(morpheme.to_dict())


@bp.route("/api/morphemes", methods=["POST"])
def create_morpheme():
    try:
        payload = parse_morpheme_payload(request.get_json(silent=True))
    except ValidationError as e:
        logger.debug(f"Rejected morpheme payload: {e}")
        return jsonify({"message": "Invalid morpheme data", "error": str(e)}), 400
    morpheme = get_repository().create_morpheme(**payload)
    return jsonify(morpheme.to_dict()), 201


@bp.route("/health", methods=["GET"])
def health_check():
    repo = get_repository()
    return jsonify({
        "status": "OK",
        "words": repo.word_count,
        "morphemes": repo.morpheme_count,
    })
