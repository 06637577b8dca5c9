from storefront.search.text import (
    find_matches,
    fuzzy_match,
    highlight,
    levenshtein_distance,
    merge_spans,
    normalize,
    normalize_with_offsets,
    to_original_spans,
)


def test_normalize_lowercases_strips_accents_and_trims():
    assert normalize("  Farine de BLÉ T65 ") == "farine de ble t65"
    assert normalize("Crème Brûlée") == "creme brulee"
    assert normalize("") == ""


def test_normalize_is_idempotent():
    for raw in ["  Ångström Öven ", "Café", "Tipo 00", "\tRYE\n"]:
        assert normalize(normalize(raw)) == normalize(raw)


def test_normalize_with_offsets_tracks_raw_positions():
    text, offsets = normalize_with_offsets("  Caf\u00e9 X")
    assert text == "cafe x"
    assert offsets == [2, 3, 4, 5, 6, 7]


def test_levenshtein_known_values():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("flour", "flower") == 2
    assert levenshtein_distance("rye", "rye") == 0


def test_levenshtein_empty_and_symmetric():
    assert levenshtein_distance("", "oven") == 4
    assert levenshtein_distance("oven", "") == 4
    for a, b in [("banneton", "banetton"), ("spelt", "pelts"), ("", "x"), ("deck", "")]:
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)


def test_fuzzy_match_normalizes_and_uses_threshold():
    assert fuzzy_match("Whole Wheat Flour", "whole wheat flour")
    assert fuzzy_match("Banneton", "banetton")
    assert not fuzzy_match("Banneton", "baguette")
    assert fuzzy_match("Banneton", "bannetonxxx", max_distance=3)
    assert not fuzzy_match("rye", "ryexx", max_distance=1)


def test_fuzzy_match_long_inputs():
    assert not fuzzy_match("Rye", "x" * 30000)
    assert fuzzy_match("a" * 5000, "a" * 4999 + "b")


def test_find_matches_returns_span_over_normalized_text():
    assert find_matches("Artisan Bread Flour", "bread") == [(8, 13)]
    assert find_matches("Artisan Bread Flour", "BREAD ") == [(8, 13)]


def test_find_matches_reports_every_start_position():
    assert find_matches("Flour, more flour", "flour") == [(0, 5), (12, 17)]
    assert find_matches("aaa", "aa") == [(0, 2), (1, 3)]


def test_normalize_lowercases_in_context():
    # capital sigma at the end of a word lowers to the final form
    assert normalize("\u039f\u0394\u039f\u03a3") == "\u03bf\u03b4\u03bf\u03c2"
    assert normalize("\u03a3\u039f\u03a3") == "\u03c3\u03bf\u03c2"
    assert find_matches("\u039f\u0394\u039f\u03a3 Flour", "\u03bf\u03b4\u03bf\u03c2") == [(0, 4)]


def test_normalize_with_offsets_when_lowercase_expands():
    # dotted capital I lowers to "i" plus a combining dot, which is dropped
    assert normalize_with_offsets("\u0130stanbul Rye") == ("istanbul rye", list(range(12)))


def test_find_matches_blank_or_missing_query():
    assert find_matches("Artisan Bread Flour", "") == []
    assert find_matches("Artisan Bread Flour", "   ") == []
    assert find_matches("Artisan Bread Flour", "oven") == []


def test_to_original_spans_realigns_after_decomposed_accents():
    text = "Cafe\u0301 Flour"
    spans = find_matches(text, "cafe")
    assert spans == [(0, 4)]
    assert to_original_spans(text, spans) == [(0, 5)]
    assert to_original_spans(text, find_matches(text, "flour")) == [(6, 11)]


def test_to_original_spans_accounts_for_trimmed_whitespace():
    text = "  Rye Flour"
    assert to_original_spans(text, find_matches(text, "rye")) == [(2, 5)]


def test_merge_spans_joins_overlaps():
    assert merge_spans([(1, 3), (0, 2), (5, 6)]) == [(0, 3), (5, 6)]


def test_highlight_wraps_raw_segments():
    assert highlight("Artisan Bread Flour", "bread") == "Artisan **Bread** Flour"
    assert highlight("Farine de Blé T65", "ble") == "Farine de **Blé** T65"
    assert highlight("aaa", "aa", marker="_") == "_aaa_"
    assert highlight("Rye Flour", "oven") == "Rye Flour"
