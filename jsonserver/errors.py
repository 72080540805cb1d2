from typing import Any, Dict


class JsonServerError(Exception):
    """Base error carrying the category string and HTTP status for a failed operation."""

    category = "Internal server error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.category, "message": self.message}


class InvalidBody(JsonServerError):
    category = "Invalid request body"
    status_code = 400


class InvalidCollection(JsonServerError):
    category = "Invalid collection"
    status_code = 400


class CollectionNotFound(JsonServerError):
    category = "Collection not found"
    status_code = 404

    def __init__(self, collection: str):
        super().__init__(f"Collection '{collection}' does not exist")
        self.collection = collection


class ItemNotFound(JsonServerError):
    category = "Item not found"
    status_code = 404

    def __init__(self, collection: str, item_id):
        super().__init__(f"Item with id {item_id} not found in collection '{collection}'")
        self.collection = collection
        self.item_id = item_id


class IdConflict(JsonServerError):
    category = "ID already exists"
    status_code = 409

    def __init__(self, collection: str, item_id):
        super().__init__(f"Item with id {item_id} already exists in collection '{collection}'")
        self.collection = collection
        self.item_id = item_id


class StorageFailure(JsonServerError):
    category = "Internal server error"
    status_code = 500


class EndpointNotFound(JsonServerError):
    category = "Endpoint not found"
    status_code = 404
