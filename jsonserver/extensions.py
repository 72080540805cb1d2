# jsonserver/extensions.py
from flask import current_app
from flask_cors import CORS

from .services.crud import CrudEngine
from .storage.json_store import DocumentStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()


def init_engine(app):
    """Bind one DocumentStore + CrudEngine to the app, backed by DB_FILE."""
    store = DocumentStore(app.config["DB_FILE"])
    app.extensions["crud_engine"] = CrudEngine(store)


def get_engine() -> CrudEngine:
    return current_app.extensions["crud_engine"]
