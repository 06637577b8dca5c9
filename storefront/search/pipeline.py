from __future__ import annotations

from typing import Sequence

from storefront.schemas import (
    BaseProduct,
    FilterParams,
    ProductIndexItem,
    ScoredResult,
    SortOption,
    Suggestion,
)
from storefront.search.filters import apply_filters
from storefront.search.scoring import relevance_score
from storefront.search.text import find_matches, normalize


def search_scored(
    products: Sequence[BaseProduct],
    params: FilterParams,
    max_distance: int = 2,
) -> list[ScoredResult]:
    """
    Filter, then rank.  With a query, results scoring zero are dropped and the
    rest ordered by score; without one, everything filtered is ordered by
    rating.  Both sorts are stable.
    """
    filtered = apply_filters(products, params)
    query = (params.query or "").strip()

    if not query:
        ranked = sorted(filtered, key=lambda p: p.rating, reverse=True)
        return [ScoredResult(product=p) for p in ranked]

    scored: list[ScoredResult] = []
    for product in filtered:
        score = relevance_score(product, params.query, max_distance=max_distance)
        if score <= 0:
            continue
        scored.append(
            ScoredResult(
                product=product,
                score=score,
                matches=tuple(find_matches(product.name, params.query)),
            )
        )
    return sorted(scored, key=lambda r: r.score, reverse=True)


def search(
    products: Sequence[BaseProduct],
    params: FilterParams,
    max_distance: int = 2,
) -> list[BaseProduct]:
    return [r.product for r in search_scored(products, params, max_distance=max_distance)]


def sort_products(products: Sequence[BaseProduct], sort_by: SortOption = "relevance") -> list[BaseProduct]:
    if sort_by == "price-asc":
        return sorted(products, key=lambda p: p.price)
    if sort_by == "price-desc":
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_by == "rating":
        return sorted(products, key=lambda p: p.rating, reverse=True)
    # relevance: keep pipeline order
    return list(products)


def build_index(products: Sequence[BaseProduct]) -> list[ProductIndexItem]:
    return [ProductIndexItem(name=p.name, category=p.category) for p in products]


def search_index(query: str, index: Sequence[ProductIndexItem], max_results: int = 5) -> list[ProductIndexItem]:
    """Autocomplete over the lightweight index: names containing the query."""
    if not (query or "").strip() or not index:
        return []
    q = normalize(query)
    return [item for item in index if q in normalize(item.name)][:max_results]


def generate_suggestions(
    products: Sequence[BaseProduct],
    query: str,
    max_suggestions: int = 5,
) -> list[Suggestion]:
    """
    Autocomplete entries for an already-ranked product list: the top three
    product names, then one entry per category if there is room left.
    """
    if not (query or "").strip() or not products:
        return []

    suggestions: list[Suggestion] = []
    seen: set[str] = set()
    for product in products[:3]:
        key = product.name.lower()
        if key in seen:
            continue
        seen.add(key)
        suggestions.append(Suggestion(text=product.name, category=product.category, type="product"))

    if len(suggestions) >= max_suggestions:
        return suggestions[:max_suggestions]

    categories = list(dict.fromkeys(p.category for p in products))
    for category in categories:
        text = category[:1].upper() + category[1:]
        if text.lower() in seen:
            continue
        suggestions.append(Suggestion(text=text, category=category, type="category"))

    return suggestions[:max_suggestions]
