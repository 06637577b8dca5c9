from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol, Sequence

from pydantic import TypeAdapter, ValidationError

from storefront.config import settings
from storefront.schemas import BakeryProduct, BaseProduct

_CATALOG_ADAPTER = TypeAdapter(list[BakeryProduct])


class CatalogLoadError(RuntimeError):
    pass


class CatalogRepository(Protocol):
    def get_all(self) -> list[BaseProduct]:
        ...


class InMemoryCatalogStore:
    def __init__(self, products: Sequence[BaseProduct]) -> None:
        self._products = tuple(products)

    def get_all(self) -> list[BaseProduct]:
        return list(self._products)


class JsonCatalogStore:
    """
    Read-only catalog backed by a JSON array of product records.
    The file is read once, on construction.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path or settings.catalog_path)
        self.debug = settings.debug_log
        self._products = tuple(self._load())

    def get_all(self) -> list[BaseProduct]:
        return list(self._products)

    def _load(self) -> list[BaseProduct]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CatalogLoadError(f"Catalog file not found: {self.path}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"Catalog file is not valid JSON: {self.path}") from exc

        try:
            products = _CATALOG_ADAPTER.validate_python(raw)
        except ValidationError as exc:
            raise CatalogLoadError(
                f"Catalog file has invalid product records: {self.path} ({exc.error_count()} errors)"
            ) from exc

        if self.debug:
            print(f"[DEBUG][CATALOG] loaded={len(products)} path={self.path}")
        return products
