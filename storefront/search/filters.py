from __future__ import annotations

from typing import Sequence

from storefront.schemas import BaseProduct, FilterParams, FlourProduct


def apply_filters(products: Sequence[BaseProduct], params: FilterParams) -> list[BaseProduct]:
    """Products passing every active filter, in their original order."""
    categories = set(params.categories)
    return [p for p in products if _passes(p, params, categories)]


def _passes(product: BaseProduct, params: FilterParams, categories: set[str]) -> bool:
    # logic_mode is not consulted: a product has a single category, so AND and
    # OR both reduce to membership in the selected set.
    if categories and product.category not in categories:
        return False

    if product.price < params.min_price or product.price > params.max_price:
        return False

    if product.rating < params.min_rating:
        return False

    if params.in_stock is not None and product.in_stock != params.in_stock:
        return False

    if params.organic is not None:
        # Only flour carries an organic flag; everything else is excluded.
        if not isinstance(product, FlourProduct):
            return False
        if product.organic != params.organic:
            return False

    return True
