from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from storefront import config


ProductCategory = Literal["flour", "banneton", "oven"]
FilterLogic = Literal["AND", "OR"]
SortOption = Literal["relevance", "price-asc", "price-desc", "rating"]
StockStatus = Literal["out", "low", "in"]

FlourType = Literal[
    "bread-flour",
    "all-purpose",
    "whole-wheat",
    "rye",
    "spelt",
    "tipo-00",
    "tipo-0",
    "semolina",
    "durum",
    "einkorn",
    "kamut",
]
BannetonShape = Literal["round", "oval", "rectangular", "baguette", "batard"]
BannetonMaterial = Literal["rattan", "cane", "wood-pulp", "plastic"]
OvenType = Literal["deck", "convection", "combi", "countertop", "pizza"]
OvenFeature = Literal[
    "steam-injection",
    "stone-deck",
    "convection-fan",
    "dual-heating",
    "programmable-controls",
    "multiple-racks",
    "glass-door",
    "temperature-probe",
    "rapid-preheat",
    "energy-efficient",
]

CATEGORIES: tuple[str, ...] = ("flour", "banneton", "oven")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class BaseProduct(_Frozen):
    id: str
    category: ProductCategory
    name: str
    brand: str
    price: float = Field(ge=0)
    description: str = ""
    image_url: str = ""
    in_stock: bool = True
    # None or 0 means out of stock, 1-9 low stock, 10+ in stock
    stock_quantity: Optional[int] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    review_count: int = 0
    tags: tuple[str, ...] = ()


class FlourProduct(BaseProduct):
    category: Literal["flour"] = "flour"
    flour_type: FlourType
    protein_content: float
    weight: float
    origin: str = ""
    organic: bool = False


class BannetonDimensions(_Frozen):
    diameter: Optional[float] = None
    length: Optional[float] = None
    width: Optional[float] = None
    height: float


class BannetonProduct(BaseProduct):
    category: Literal["banneton"] = "banneton"
    shape: BannetonShape
    material: BannetonMaterial
    dimensions: BannetonDimensions
    capacity: int
    liner_included: bool = False


class OvenDimensions(_Frozen):
    width: float
    depth: float
    height: float


class OvenProduct(BaseProduct):
    category: Literal["oven"] = "oven"
    oven_type: OvenType
    features: tuple[OvenFeature, ...] = ()
    dimensions: OvenDimensions
    power_requirement: str = ""
    capacity: str = ""
    max_temperature: int


BakeryProduct = Annotated[
    Union[FlourProduct, BannetonProduct, OvenProduct],
    Field(discriminator="category"),
]


class FilterParams(_Frozen):
    query: str = ""
    categories: frozenset[str] = frozenset()
    min_price: float = Field(default_factory=lambda: config.settings.default_min_price)
    max_price: float = Field(default_factory=lambda: config.settings.default_max_price)
    min_rating: float = 0.0
    in_stock: Optional[bool] = None
    organic: Optional[bool] = None
    # Accepted and round-tripped, but not consulted by the filter engine.
    logic_mode: FilterLogic = "AND"


class ScoredResult(_Frozen):
    product: BakeryProduct
    score: int = Field(default=0, ge=0)
    matches: tuple[tuple[int, int], ...] = ()


class ProductIndexItem(_Frozen):
    name: str
    category: str


class Suggestion(_Frozen):
    text: str
    category: Optional[str] = None
    type: Literal["product", "category"]


class PriceRange(_Frozen):
    min: int
    max: int


class StockStats(_Frozen):
    total: int
    in_stock: int
    out_of_stock: int
    in_stock_percentage: int


class RatingStats(_Frozen):
    average: float
    highest: float
    lowest: float


class CatalogStats(_Frozen):
    price_range: PriceRange
    category_counts: dict[str, int]
    stock: StockStats
    rating: RatingStats
    popular_tags: list[str] = Field(default_factory=list)
