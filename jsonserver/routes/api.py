from flask import Blueprint, current_app, jsonify, request

from ..extensions import get_engine
from ..services.crud import now_iso

bp = Blueprint("api", __name__)


def json_body():
    """
    Decoded request body. A request without a JSON content type, or with an
    empty body, reads as {}; malformed JSON reads as None and is rejected later.
    """
    if not request.is_json or not request.get_data():
        return {}
    return request.get_json(silent=True)


def health_payload() -> dict:
    return {
        "message": f"{current_app.config['APP_TITLE']} is running",
        "version": current_app.config["SERVER_VERSION"],
        "endpoints": {
            "collections": "GET /collections",
            "getAll": "GET /:collection",
            "getOne": "GET /:collection/:id",
            "create": "POST /:collection",
            "update": "PUT /:collection/:id",
            "delete": "DELETE /:collection/:id",
            "updateDatabase": "POST /api/update-database",
        },
        "timestamp": now_iso(),
    }


@bp.get("/api/health")
def health():
    return jsonify(health_payload())


@bp.get("/db")
def whole_database():
    return jsonify(get_engine().read_document())


@bp.get("/collections")
def list_collections():
    collections = get_engine().list_collections()
    return jsonify({"collections": collections, "total": len(collections)})


@bp.post("/api/update-database")
def update_database():
    """
    JSON body: { "<collection>": <sample data>, ... }
    Collections that already exist keep their data; only new names are adopted.
    """
    result = get_engine().merge_structure(json_body())
    return jsonify(result)
