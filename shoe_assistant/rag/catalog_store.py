from __future__ import annotations

import threading
import time
from typing import Any, Callable, Iterable, Mapping

from shoe_assistant.config import settings
from shoe_assistant.schemas import ProductRecord

Catalog = tuple[ProductRecord, ...]

EMPTY_CATALOG: Catalog = ()


class CatalogStore:
    """
    Holds the product catalog as an immutable snapshot.
    A reload builds a complete new tuple and swaps the reference once, so a
    ranking call that grabbed ``current()`` keeps a consistent view.
    """

    def __init__(self) -> None:
        self._catalog: Catalog = EMPTY_CATALOG
        self._write_lock = threading.Lock()
        self.debug = settings.debug_log
        self.last_error: str = ""
        self.loaded_at: float | None = None

    def __len__(self) -> int:
        return len(self._catalog)

    def current(self) -> Catalog:
        return self._catalog

    def load(self, rows: Iterable[Mapping[str, Any]]) -> Catalog:
        try:
            catalog = tuple(ProductRecord.from_row(row) for row in rows)
        except Exception as exc:
            return self._fail(exc)
        with self._write_lock:
            self._catalog = catalog
            self.loaded_at = time.time()
            self.last_error = ""
        print(f"[CATALOG] Loaded {len(catalog)} products into database")
        if self.debug:
            print(f"[DEBUG][CATALOG] first_handles={[product.handle for product in catalog[:5]]}")
        return catalog

    def load_from(self, source: Callable[[], Iterable[Mapping[str, Any]]]) -> Catalog:
        try:
            rows = source()
        except Exception as exc:
            return self._fail(exc)
        return self.load(rows)

    def _fail(self, exc: Exception) -> Catalog:
        with self._write_lock:
            self._catalog = EMPTY_CATALOG
            self.loaded_at = time.time()
            self.last_error = f"{exc.__class__.__name__}: {exc}"
        print(f"[ERROR][CATALOG] Error loading products database: {self.last_error}")
        return EMPTY_CATALOG

    def stats(self) -> dict:
        return {
            "products": len(self._catalog),
            "loaded_at": self.loaded_at,
            "last_error": self.last_error,
        }
