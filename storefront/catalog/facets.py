from __future__ import annotations

import math
from collections import Counter
from typing import Sequence

from storefront.schemas import (
    CATEGORIES,
    BaseProduct,
    CatalogStats,
    PriceRange,
    RatingStats,
    StockStats,
    StockStatus,
)

LOW_STOCK_LIMIT = 10


def price_range(products: Sequence[BaseProduct]) -> PriceRange:
    if not products:
        return PriceRange(min=0, max=0)
    prices = [p.price for p in products]
    return PriceRange(min=math.floor(min(prices)), max=math.ceil(max(prices)))


def category_counts(products: Sequence[BaseProduct]) -> dict[str, int]:
    counts = Counter(p.category for p in products)
    return {category: counts.get(category, 0) for category in CATEGORIES}


def stock_stats(products: Sequence[BaseProduct]) -> StockStats:
    total = len(products)
    in_stock = sum(1 for p in products if p.in_stock)
    return StockStats(
        total=total,
        in_stock=in_stock,
        out_of_stock=total - in_stock,
        # half-up, so 12.5 becomes 13
        in_stock_percentage=math.floor(in_stock * 100 / total + 0.5) if total else 0,
    )


def rating_stats(products: Sequence[BaseProduct]) -> RatingStats:
    if not products:
        return RatingStats(average=0.0, highest=0.0, lowest=0.0)
    ratings = [p.rating for p in products]
    return RatingStats(
        average=round(sum(ratings) / len(ratings), 1),
        highest=max(ratings),
        lowest=min(ratings),
    )


def popular_tags(products: Sequence[BaseProduct], limit: int = 10) -> list[str]:
    # most_common keeps first-seen order among equal counts
    counts = Counter(tag for p in products for tag in p.tags)
    return [tag for tag, _ in counts.most_common(limit)]


def catalog_stats(products: Sequence[BaseProduct]) -> CatalogStats:
    return CatalogStats(
        price_range=price_range(products),
        category_counts=category_counts(products),
        stock=stock_stats(products),
        rating=rating_stats(products),
        popular_tags=popular_tags(products),
    )


def stock_status(product: BaseProduct) -> StockStatus:
    if not product.in_stock or not product.stock_quantity:
        return "out"
    if product.stock_quantity < LOW_STOCK_LIMIT:
        return "low"
    return "in"
