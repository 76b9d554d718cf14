import pytest
from kitchen_scaler.utils.name_cleaner import clean_ingredient_name


@pytest.mark.parametrize("raw, expected", [
    ("flour", "Flour"),
    ("Butter (room temperature)", "Butter (room temperature)"),
    ("butter ( softened )", "Butter (softened)"),
    ("Butter (unsalted, cold)", "Butter (unsalted, cold)"),
    ("Sugar (200 g)", "Sugar"),
    ("= salt :", "Salt"),
    ("[sifted] flour", "Sifted flour"),
    ("– milk –", "Milk"),
    ("cream ~> heavy", "Cream heavy"),
    ("Flour – (2 cups)", "Flour"),
    ("", ""),
])
def test_clean_ingredient_name(raw, expected):
    assert clean_ingredient_name(raw) == expected


@pytest.mark.parametrize("raw", [
    "flour",
    "Butter (room temperature) (2 tbsp)",
    "Flour – – (2 cups)",
    "  [brown] sugar :: packed  ",
    "eggs (large) – beaten",
])
def test_cleaning_is_a_fixed_point(raw):
    once = clean_ingredient_name(raw)
    assert clean_ingredient_name(once) == once


def test_already_capitalized_names_are_untouched():
    assert clean_ingredient_name("All-purpose flour") == "All-purpose flour"
