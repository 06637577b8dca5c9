from __future__ import annotations

import math
from typing import Mapping, Optional

from storefront import config
from storefront.schemas import FilterParams


def parse_search_params(raw: Mapping[str, Optional[str]] | None) -> FilterParams:
    """
    Build FilterParams from raw string parameters (a query string, form data).
    Never raises: unusable values fall back to their defaults.
    """
    raw = raw or {}
    return FilterParams(
        query=str(raw.get("q") or ""),
        categories=frozenset(_split_csv(raw.get("categories"))),
        min_price=_as_number(raw.get("minPrice"), config.settings.default_min_price),
        max_price=_as_number(raw.get("maxPrice"), config.settings.default_max_price),
        min_rating=_as_number(raw.get("minRating"), 0.0),
        in_stock=_as_tristate(raw.get("inStock")),
        organic=_as_tristate(raw.get("organic")),
        logic_mode="OR" if raw.get("logicMode") == "OR" else "AND",
    )


def filter_params_to_query(params: FilterParams) -> dict[str, str]:
    """Inverse of parse_search_params, emitting only non-default values."""
    out: dict[str, str] = {}
    if params.query.strip():
        out["q"] = params.query
    if params.categories:
        out["categories"] = ",".join(sorted(params.categories))
    if params.min_price > config.settings.default_min_price:
        out["minPrice"] = _fmt_number(params.min_price)
    if params.max_price < config.settings.default_max_price:
        out["maxPrice"] = _fmt_number(params.max_price)
    if params.min_rating > 0:
        out["minRating"] = _fmt_number(params.min_rating)
    if params.in_stock is not None:
        out["inStock"] = "true" if params.in_stock else "false"
    if params.organic is not None:
        out["organic"] = "true" if params.organic else "false"
    if params.logic_mode == "OR":
        out["logicMode"] = "OR"
    return out


def _split_csv(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in str(value).split(",") if part.strip()]


def _as_number(value: Optional[str], default: float) -> float:
    # Missing, unparsable and zero all mean "use the default".
    try:
        number = float(value) if value not in (None, "") else 0.0
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or number == 0:
        return default
    return number


def _as_tristate(value: Optional[str]) -> Optional[bool]:
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def _fmt_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
