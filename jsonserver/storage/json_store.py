from pathlib import Path
import json
import logging
import os
import threading
from typing import Any, Dict

from ..errors import StorageFailure

log = logging.getLogger(__name__)


class DocumentStore:
    """Whole-document JSON on disk: one file holds every collection."""

    def __init__(self, db_file: Path):
        self.db_file = Path(db_file)
        self.db_file.parent.mkdir(parents=True, exist_ok=True)
        # Held by callers across a full load -> mutate -> save cycle.
        self.lock = threading.RLock()

    def load(self) -> Dict[str, Any]:
        p = self.db_file
        try:
            with p.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            log.info("Database file %s not found, creating new one", p)
            empty: Dict[str, Any] = {}
            self.save(empty)
            return empty
        except (OSError, ValueError) as e:
            raise StorageFailure(f"Failed to read database: {e}") from e

    def save(self, doc: Dict[str, Any]):
        p = self.db_file
        tmp = p.with_name(p.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(doc, f, indent=2, ensure_ascii=False)
            os.replace(tmp, p)
        except (OSError, TypeError, ValueError) as e:
            tmp.unlink(missing_ok=True)
            raise StorageFailure(f"Failed to write database: {e}") from e
