from pathlib import Path

from flask import Blueprint, current_app, jsonify, render_template, request, send_from_directory
from werkzeug.security import safe_join

from .api import health_payload

bp = Blueprint("pages", __name__)


@bp.before_app_request
def serve_public_file():
    """
    Files under PUBLIC_DIR shadow the API routes, so a frontend can live next to the data.
    "/" maps to index.html.
    """
    if request.method not in ("GET", "HEAD"):
        return None
    public_dir = Path(current_app.config["PUBLIC_DIR"])
    rel = request.path.lstrip("/") or "index.html"
    target = safe_join(str(public_dir), rel)
    if target and Path(target).is_file():
        return send_from_directory(public_dir, rel)
    return None


@bp.get("/")
def index():
    return jsonify(health_payload())


@bp.get("/docs")
def docs():
    docs_file = Path(current_app.config["DOCS_FILE"])
    try:
        content = docs_file.read_text(encoding="utf-8")
    except OSError:
        current_app.logger.exception("Error serving documentation")
        return jsonify({
            "error": "Internal server error",
            "message": "Failed to load documentation",
        }), 500
    return render_template(
        "docs.html",
        content=content,
        title=current_app.config["APP_TITLE"],
    )
