from __future__ import annotations

import re

from storefront.schemas import BaseProduct, FlourProduct, OvenProduct
from storefront.search.text import fuzzy_match, normalize

PROTEIN_RE = re.compile(r"(\d+)%?\s*protein", re.IGNORECASE)

NAME_EXACT = 100
NAME_PREFIX = 80
NAME_CONTAINS = 60
NAME_FUZZY = 10
BRAND_EXACT = 50
BRAND_CONTAINS = 30
DESCRIPTION_CONTAINS = 20
TAG_MATCH = 40
PROTEIN_MATCH = 10
FEATURE_MATCH = 15
POPULARITY_BONUS = 5
POPULARITY_MIN_RATING = 4.5


def relevance_score(product: BaseProduct, query: str, max_distance: int = 2) -> int:
    """
    Additive relevance score of ``product`` for ``query``.

    - name: exact 100, prefix 80, contains 60, fuzzy 10 (first that applies)
    - brand: exact 50, contains 30
    - description contains: 20
    - tags: 40 per tag containing the query
    - flour: +10 when "<n>% protein" in the query is within 1 point of the product
    - oven: +15 per product feature named in the query
    - rating >= 4.5: +5
    """
    if not (query or "").strip():
        return 0

    q = normalize(query)
    return (
        _name_score(normalize(product.name), q, max_distance)
        + _brand_score(normalize(product.brand), q)
        + (DESCRIPTION_CONTAINS if q in normalize(product.description) else 0)
        + _tag_score(product.tags, q)
        + _category_bonus(product, query, q)
        + (POPULARITY_BONUS if product.rating >= POPULARITY_MIN_RATING else 0)
    )


def _name_score(name: str, q: str, max_distance: int) -> int:
    if name == q:
        return NAME_EXACT
    if name.startswith(q):
        return NAME_PREFIX
    if q in name:
        return NAME_CONTAINS
    if fuzzy_match(name, q, max_distance):
        return NAME_FUZZY
    return 0


def _brand_score(brand: str, q: str) -> int:
    if brand == q:
        return BRAND_EXACT
    if q in brand:
        return BRAND_CONTAINS
    return 0


def _tag_score(tags: tuple[str, ...], q: str) -> int:
    return sum(TAG_MATCH for tag in tags if q in normalize(tag))


def _category_bonus(product: BaseProduct, raw_query: str, q: str) -> int:
    if isinstance(product, FlourProduct):
        return protein_bonus(product, raw_query)
    if isinstance(product, OvenProduct):
        return sum(FEATURE_MATCH for feature in product.features if normalize(feature) in q)
    return 0


def protein_bonus(product: FlourProduct, raw_query: str) -> int:
    match = PROTEIN_RE.search(raw_query or "")
    if not match:
        return 0
    wanted = int(match.group(1))
    return PROTEIN_MATCH if abs(product.protein_content - wanted) <= 1 else 0
