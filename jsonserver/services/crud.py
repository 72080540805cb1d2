from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..errors import CollectionNotFound, IdConflict, InvalidCollection, ItemNotFound
from ..storage import collections as coll
from ..storage.json_store import DocumentStore


def now_iso() -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CrudEngine:
    """
    Generic CRUD over the collections of a DocumentStore.

    Every call is a full load -> mutate -> save cycle under the store lock,
    so mutations from concurrent request threads never interleave.
    """

    def __init__(self, store: DocumentStore, clock: Optional[Callable[[], str]] = None):
        self.store = store
        self.clock = clock or now_iso

    # --- reads ---

    def read_document(self) -> Dict[str, Any]:
        with self.store.lock:
            return self.store.load()

    def list_collections(self) -> List[Dict[str, Any]]:
        with self.store.lock:
            doc = self.store.load()
        return [
            {"name": name, "count": len(value) if isinstance(value, list) else 0}
            for name, value in doc.items()
        ]

    def get_all(self, collection: str) -> tuple[str, Any, int]:
        with self.store.lock:
            doc = self.store.load()
            value, created = coll.get_or_create(doc, collection)
            if created:
                self.store.save(doc)
        count = len(value) if isinstance(value, list) else 0
        return collection, value, count

    def get_one(self, collection: str, item_id) -> Dict[str, Any]:
        with self.store.lock:
            doc = self.store.load()
        if not coll.exists(doc, collection):
            raise CollectionNotFound(collection)
        items = coll.items_of(doc[collection])
        idx = coll.find_index(items, item_id)
        if idx == -1:
            raise ItemNotFound(collection, item_id)
        return items[idx]

    # --- writes ---

    def create(self, collection: str, payload) -> Dict[str, Any]:
        item = coll.decode_item(payload)
        with self.store.lock:
            doc = self.store.load()
            value, _ = coll.get_or_create(doc, collection)
            if not isinstance(value, list):
                raise InvalidCollection(f"Collection '{collection}' does not hold a list of items")

            # Falsy ids (0, "", null, false) count as "not supplied".
            if not item.get("id"):
                item["id"] = coll.next_id(value)
            elif coll.find_index(value, item["id"]) != -1:
                raise IdConflict(collection, item["id"])

            item["createdAt"] = self.clock()
            item["updatedAt"] = item["createdAt"]

            value.append(item)
            self.store.save(doc)
        return item

    def update(self, collection: str, item_id, payload) -> Dict[str, Any]:
        updates = coll.decode_item(payload)
        with self.store.lock:
            doc = self.store.load()
            if not coll.exists(doc, collection):
                raise CollectionNotFound(collection)
            items = coll.items_of(doc[collection])
            idx = coll.find_index(items, item_id)
            if idx == -1:
                raise ItemNotFound(collection, item_id)

            original = items[idx]
            merged = {**original, **updates, "id": original["id"]}
            # Items adopted by merge_structure may have no createdAt; keep it absent.
            if "createdAt" in original:
                merged["createdAt"] = original["createdAt"]
            else:
                merged.pop("createdAt", None)
            merged["updatedAt"] = self.clock()
            items[idx] = merged
            self.store.save(doc)
        return merged

    def delete(self, collection: str, item_id) -> Dict[str, Any]:
        with self.store.lock:
            doc = self.store.load()
            if not coll.exists(doc, collection):
                raise CollectionNotFound(collection)
            items = coll.items_of(doc[collection])
            idx = coll.find_index(items, item_id)
            if idx == -1:
                raise ItemNotFound(collection, item_id)
            deleted = items.pop(idx)
            self.store.save(doc)
        return {
            "message": f"Item with id {item_id} deleted successfully from collection '{collection}'",
            "deletedId": deleted["id"],
        }

    def merge_structure(self, new_structure) -> Dict[str, Any]:
        """
        Adopt the collections of ``new_structure`` that the document does not have yet.
        Existing collections always win: their data is kept and the sample is dropped.
        """
        structure = coll.decode_item(new_structure, what="a valid database structure object")
        with self.store.lock:
            current = self.store.load()
            added = [k for k in structure if not coll.exists(current, k)]
            existing = [k for k in structure if coll.exists(current, k)]
            for k in added:
                current[k] = structure[k]
            self.store.save(current)
        return {
            "message": "Database structure updated successfully",
            "addedCollections": added,
            "existingCollections": existing,
            "totalCollections": len(current),
        }
