from __future__ import annotations

from typing import Mapping, Optional, Sequence

from storefront.catalog.facets import catalog_stats
from storefront.catalog.store import CatalogRepository, JsonCatalogStore
from storefront.config import settings
from storefront.params import parse_search_params
from storefront.schemas import (
    BaseProduct,
    CatalogStats,
    FilterParams,
    ProductIndexItem,
    ScoredResult,
    SortOption,
    Suggestion,
)
from storefront.search.filters import apply_filters
from storefront.search.pipeline import (
    build_index,
    generate_suggestions,
    search_index,
    search_scored,
    sort_products,
)


class SearchService:
    """Read-only facade over a catalog; calls share no per-request state."""

    def __init__(self, catalog: CatalogRepository | None = None) -> None:
        self.catalog = catalog or JsonCatalogStore()
        self.products = tuple(self.catalog.get_all())
        self.max_distance = settings.fuzzy_max_distance
        self.suggestions_limit = settings.suggestions_limit
        self.debug = settings.debug_log

    def search_products(
        self,
        params: FilterParams,
        sort_by: SortOption = "relevance",
    ) -> list[BaseProduct]:
        results = self.search_results(params)
        return sort_products([r.product for r in results], sort_by)

    def search_results(self, params: FilterParams) -> list[ScoredResult]:
        results = search_scored(self.products, params, max_distance=self.max_distance)
        if self.debug:
            print(
                f"[DEBUG][SEARCH] query='{params.query}' categories={sorted(params.categories)} "
                f"price=[{params.min_price}, {params.max_price}] min_rating={params.min_rating} "
                f"in_stock={params.in_stock} organic={params.organic} logic={params.logic_mode} "
                f"results={len(results)}"
            )
            for idx, r in enumerate(results[:3], start=1):
                print(f"[DEBUG][SEARCH] top#{idx} name='{r.product.name}' score={r.score} matches={list(r.matches)}")
        return results

    def search_raw(self, raw: Mapping[str, Optional[str]], sort_by: SortOption = "relevance") -> list[BaseProduct]:
        return self.search_products(parse_search_params(raw), sort_by=sort_by)

    def product_index(self, params: FilterParams) -> list[ProductIndexItem]:
        return build_index(apply_filters(self.products, params))

    def autocomplete(self, params: FilterParams, max_results: int = 5) -> list[ProductIndexItem]:
        # Filter-aware name lookup without scoring the catalog.
        return search_index(params.query, self.product_index(params), max_results=max_results)

    def suggestions(
        self,
        params: FilterParams,
        ranked: Sequence[BaseProduct] | None = None,
    ) -> list[Suggestion]:
        if not params.query.strip():
            return []
        if ranked is None:
            ranked = [r.product for r in self.search_results(params)]
        return generate_suggestions(ranked, params.query, max_suggestions=self.suggestions_limit)

    def stats(self) -> CatalogStats:
        return catalog_stats(self.products)
