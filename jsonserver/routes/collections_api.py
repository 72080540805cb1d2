from flask import Blueprint, jsonify

from ..extensions import get_engine
from .api import json_body

bp = Blueprint("collections_api", __name__)


@bp.get("/<collection>")
def get_all(collection):
    name, data, count = get_engine().get_all(collection)
    return jsonify({"collection": name, "data": data, "count": count})


@bp.get("/<collection>/<item_id>")
def get_one(collection, item_id):
    return jsonify(get_engine().get_one(collection, item_id))


@bp.post("/<collection>")
def create_item(collection):
    item = get_engine().create(collection, json_body())
    return jsonify(item), 201


@bp.put("/<collection>/<item_id>")
def update_item(collection, item_id):
    return jsonify(get_engine().update(collection, item_id, json_body()))


@bp.delete("/<collection>/<item_id>")
def delete_item(collection, item_id):
    return jsonify(get_engine().delete(collection, item_id))
