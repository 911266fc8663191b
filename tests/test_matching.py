from itertools import permutations

import pytest

from api.services.matching import count_hits, matches, normalize, term_hits

BASE = ["pollo", "brócoli", "arroz integral", "limón"]


def test_normalize_trims_and_lowercases():
    assert normalize("  PoLLo ") == "pollo"
    assert normalize("") == ""


@pytest.mark.parametrize("term", ["pollo", "POLLO", "  pollo  ", "arroz", "arroz integral", "brócolis"])
def test_term_hits_bidirectional(term):
    # "arroz" ⊂ "arroz integral"; "brócoli" ⊂ "brócolis"
    assert term_hits(term, BASE)


def test_term_misses():
    assert not term_hits("salmón", BASE)


@pytest.mark.parametrize("term", ["", "   ", "\t"])
def test_empty_terms_never_hit(term):
    assert not term_hits(term, BASE)
    assert not term_hits(term, ["", "pollo"])


def test_empty_base_ingredient_is_ignored():
    # un ingrediente base vacío sería subcadena de cualquier término
    assert not term_hits("salmón", ["", "pollo"])


def test_three_of_four_matches():
    assert matches(["pollo", "brócoli", "arroz", "salmón"], BASE)
    assert count_hits(["pollo", "brócoli", "arroz", "salmón"], BASE) == 3


def test_two_of_four_does_not_match():
    assert not matches(["pollo", "brócoli", "tofu", "salmón"], BASE)


def test_blank_terms_count_as_misses():
    assert not matches(["pollo", "brócoli", "", "  "], BASE)
    assert matches(["pollo", "brócoli", "limón", " "], BASE)


def test_case_insensitive_on_both_sides():
    assert matches(["POLLO", "Brócoli", "ARROZ", "x"], ["Pollo", "BRÓCOLI", "Arroz Integral", "Limón"])


@pytest.mark.parametrize("query", [
    ["pollo", "brócoli", "arroz", "salmón"],
    ["pollo", "tofu", "arroz", "salmón"],
    ["pollo", "brócoli", "arroz", "limón"],
])
def test_order_independence(query):
    expected = matches(query, BASE)
    for perm in permutations(query):
        assert matches(list(perm), BASE) == expected


def test_single_letters_hit_by_containment():
    # "a" ⊂ "arroz", "b" ⊂ "brócoli", "c" ⊂ "brócoli": 3 aciertos aunque sean letras sueltas
    base = ["pollo", "arroz", "brócoli", "limón"]
    assert count_hits(["a", "b", "c", "d"], base) == 3
    assert matches(["a", "b", "c", "d"], base)
    assert not matches(["tofu", "soja", "pasta", "tomate"], base)
