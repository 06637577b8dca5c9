from storefront.schemas import BannetonProduct, FlourProduct, OvenProduct
from storefront.search.scoring import protein_bonus, relevance_score


def _flour(**overrides) -> FlourProduct:
    data = {
        "id": "f-1",
        "name": "Artisan Bread Flour",
        "brand": "Acme",
        "price": 9.0,
        "rating": 4.0,
        "flour_type": "bread-flour",
        "protein_content": 12.7,
        "weight": 2.0,
    }
    data.update(overrides)
    return FlourProduct(**data)


def _oven(**overrides) -> OvenProduct:
    data = {
        "id": "o-1",
        "name": "Bakers Pride",
        "brand": "Acme",
        "price": 2500.0,
        "rating": 4.0,
        "oven_type": "deck",
        "features": ["steam-injection", "stone-deck", "glass-door"],
        "dimensions": {"width": 80, "depth": 60, "height": 70},
        "max_temperature": 300,
    }
    data.update(overrides)
    return OvenProduct(**data)


def _banneton(**overrides) -> BannetonProduct:
    data = {
        "id": "b-1",
        "name": "Round Rattan Banneton",
        "brand": "Acme",
        "price": 20.0,
        "rating": 4.0,
        "shape": "round",
        "material": "rattan",
        "dimensions": {"diameter": 23, "height": 8},
        "capacity": 1000,
    }
    data.update(overrides)
    return BannetonProduct(**data)


def test_blank_query_scores_zero():
    product = _flour(rating=5.0, tags=["bread"])
    assert relevance_score(product, "") == 0
    assert relevance_score(product, "   ") == 0


def test_name_exact_match_scores_100():
    assert relevance_score(_flour(name="Whole Wheat Flour"), "whole wheat flour") == 100
    assert relevance_score(_flour(name="Farine de Blé"), "FARINE DE BLE") == 100


def test_name_prefix_contains_and_fuzzy_are_exclusive():
    product = _flour()
    assert relevance_score(product, "artisan") == 80
    assert relevance_score(product, "bread") == 60
    assert relevance_score(_flour(name="Rye"), "rya") == 10
    assert relevance_score(_flour(name="Bread"), "bread") == 100


def test_fuzzy_threshold_is_configurable():
    product = _flour(name="Spelt")
    assert relevance_score(product, "spxxt") == 10
    assert relevance_score(product, "spxxt", max_distance=1) == 0


def test_brand_scores():
    assert relevance_score(_flour(name="Tipo 00", brand="Caputo"), "caputo") == 50
    assert relevance_score(_flour(name="Whole Wheat Flour", brand="Bob's Red Mill"), "red mill") == 30


def test_description_contains():
    product = _flour(name="Country Blend", description="Great for sourdough boules")
    assert relevance_score(product, "boules") == 20


def test_each_matching_tag_adds_40():
    product = _flour(name="Country Blend", tags=["sourdough", "Sourdough starter", "rye"])
    assert relevance_score(product, "sourdough") == 80


def test_score_has_no_upper_bound():
    product = _flour(name="Rye", tags=["rye", "rye flour", "dark rye"], rating=4.9)
    assert relevance_score(product, "rye") == 100 + 3 * 40 + 5


def test_popularity_bonus_applies_at_4_5():
    assert relevance_score(_flour(name="Whole Wheat Flour", rating=4.5), "whole wheat flour") == 105
    assert relevance_score(_flour(name="Whole Wheat Flour", rating=4.49), "whole wheat flour") == 100


def test_popularity_bonus_counts_even_without_text_match():
    assert relevance_score(_flour(rating=4.8), "zzzz") == 5


def test_protein_bonus_within_one_point():
    product = _flour(name="Farine T65", protein_content=11.5)
    assert relevance_score(product, "12% protein") == 10
    assert protein_bonus(product, "12 PROTEIN") == 10
    assert protein_bonus(product, "14% protein") == 0
    assert protein_bonus(product, "high protein") == 0


def test_protein_bonus_only_for_flour():
    assert relevance_score(_banneton(), "12% protein") == 0


def test_oven_feature_bonus_per_feature_named_in_query():
    product = _oven()
    assert relevance_score(product, "deck oven with steam-injection and stone-deck") == 30
    assert relevance_score(product, "steam injection") == 0


def test_score_is_never_negative():
    for query in ["x", "12% protein", "stone-deck", "acme"]:
        for product in (_flour(), _oven(), _banneton()):
            assert relevance_score(product, query) >= 0
